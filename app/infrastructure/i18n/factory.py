"""Factory functions for creating i18n components.

Provides convenience functions for building localization options and the
negotiator from application settings.
"""

from typing import List

import structlog

from infrastructure.configuration.infrastructure.localization import (
    LocalizationSettings,
)
from infrastructure.i18n.negotiator import RequestCultureNegotiator
from infrastructure.i18n.options import RequestLocalizationOptions
from infrastructure.i18n.providers import (
    AcceptLanguageHeaderRequestCultureProvider,
    CookieRequestCultureProvider,
    QueryStringRequestCultureProvider,
    RequestCultureProvider,
    RouteDataRequestCultureProvider,
)

logger = structlog.get_logger().bind(component="i18n.factory")


def create_request_culture_providers(
    settings: LocalizationSettings,
) -> List[RequestCultureProvider]:
    """Build the provider chain described by settings.

    Order: route data (if enabled), query string, cookie, Accept-Language.
    """
    providers: List[RequestCultureProvider] = []
    if settings.use_route_data:
        providers.append(
            RouteDataRequestCultureProvider(
                culture_key=settings.route_data_key,
                ui_culture_key=settings.ui_route_data_key,
            )
        )
    providers.extend(
        [
            QueryStringRequestCultureProvider(
                culture_key=settings.query_string_key,
                ui_culture_key=settings.ui_query_string_key,
            ),
            CookieRequestCultureProvider(cookie_name=settings.cookie_name),
            AcceptLanguageHeaderRequestCultureProvider(
                maximum_values_to_try=settings.max_accept_language_values
            ),
        ]
    )
    return providers


def create_localization_options(
    settings: LocalizationSettings,
) -> RequestLocalizationOptions:
    """Create RequestLocalizationOptions from localization settings.

    Args:
        settings: Localization settings (typically ``get_settings().localization``).

    Returns:
        RequestLocalizationOptions: Immutable options for the negotiator.

    Raises:
        ValueError: If a configured culture name is invalid.

    Usage:
        options = create_localization_options(get_settings().localization)
        negotiator = RequestCultureNegotiator(options)
    """
    options = RequestLocalizationOptions(
        supported_cultures=settings.supported_cultures,
        supported_ui_cultures=settings.supported_ui_cultures,
        request_culture_providers=tuple(create_request_culture_providers(settings)),
        fall_back_to_parent_cultures=settings.fall_back_to_parent_cultures,
        fall_back_to_parent_ui_cultures=settings.fall_back_to_parent_ui_cultures,
        fall_back_to_default_culture=settings.fall_back_to_default_culture,
        apply_current_culture_to_response_headers=settings.apply_culture_to_response_headers,
    ).set_default_culture(settings.default_culture, settings.default_ui_culture)

    logger.info(
        "localization_options_created",
        default_culture=options.default_request_culture.culture,
        default_ui_culture=options.default_request_culture.ui_culture,
        supported_cultures=options.supported_cultures,
        supported_ui_cultures=options.supported_ui_cultures,
        strict=not options.fall_back_to_default_culture,
        providers=[p.name for p in options.request_culture_providers],
    )
    return options


def create_request_culture_negotiator(
    settings: LocalizationSettings,
) -> RequestCultureNegotiator:
    """Create a RequestCultureNegotiator configured from settings."""
    return RequestCultureNegotiator(create_localization_options(settings))
