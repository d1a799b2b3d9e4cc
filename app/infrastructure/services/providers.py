"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_localization_options
from infrastructure.i18n.negotiator import RequestCultureNegotiator
from infrastructure.i18n.options import RequestLocalizationOptions


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_localization_options() -> RequestLocalizationOptions:
    """
    Get application-scoped localization options singleton.

    Options are immutable, so a single instance is shared by every request.

    Returns:
        RequestLocalizationOptions: Options built from settings.localization.
    """
    return create_localization_options(get_settings().localization)


@lru_cache
def get_request_culture_negotiator() -> RequestCultureNegotiator:
    """
    Get application-scoped request culture negotiator singleton.

    Returns:
        RequestCultureNegotiator: Negotiator configured with the application options.
    """
    return RequestCultureNegotiator(get_localization_options())
