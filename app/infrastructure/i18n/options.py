"""Request localization options.

Immutable configuration consumed by the RequestCultureNegotiator. Builder
helpers return new instances so a single options object can be shared
safely across concurrent requests.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from infrastructure.i18n.cultures import is_valid_culture_name, normalize_culture_name
from infrastructure.i18n.models import RequestCulture
from infrastructure.i18n.providers import (
    AcceptLanguageHeaderRequestCultureProvider,
    CookieRequestCultureProvider,
    QueryStringRequestCultureProvider,
    RequestCultureProvider,
)


def default_request_culture_providers() -> Tuple[RequestCultureProvider, ...]:
    """Default provider chain: query string, then cookie, then Accept-Language."""
    return (
        QueryStringRequestCultureProvider(),
        CookieRequestCultureProvider(),
        AcceptLanguageHeaderRequestCultureProvider(),
    )


def _normalize_supported(
    names: Optional[Iterable[str]], label: str
) -> Optional[Tuple[str, ...]]:
    if names is None:
        return None

    normalized = []
    for name in names:
        if not is_valid_culture_name(name):
            raise ValueError(f"Invalid {label} entry: {name!r}")
        canonical = normalize_culture_name(name)
        if canonical.lower() not in (n.lower() for n in normalized):
            normalized.append(canonical)

    if not normalized:
        raise ValueError(f"{label} must not be empty; use None for no restriction")
    return tuple(normalized)


@dataclass(frozen=True)
class RequestLocalizationOptions:
    """Configuration for request culture negotiation.

    Attributes:
        default_request_culture: Fallback culture pair, exempt from the
            supported-culture check.
        supported_cultures: Allowed cultures, or None for no restriction.
        supported_ui_cultures: Allowed UI cultures, or None for no restriction.
        request_culture_providers: Providers consulted in order.
        fall_back_to_parent_cultures: Try parent cultures of unsupported
            culture candidates.
        fall_back_to_parent_ui_cultures: Try parent cultures of unsupported
            UI culture candidates.
        fall_back_to_default_culture: Use the default culture when no
            candidate matches. When False (strict mode), negotiation fails.
        apply_current_culture_to_response_headers: Set Content-Language on
            responses to the resolved culture.

    Example:
        options = (
            RequestLocalizationOptions()
            .set_default_culture("en-US")
            .add_supported_cultures("en-US", "fr-CA")
            .add_supported_ui_cultures("en-US", "fr-CA")
        )
    """

    default_request_culture: RequestCulture = field(
        default_factory=lambda: RequestCulture("en-US")
    )
    supported_cultures: Optional[Tuple[str, ...]] = None
    supported_ui_cultures: Optional[Tuple[str, ...]] = None
    request_culture_providers: Tuple[RequestCultureProvider, ...] = field(
        default_factory=default_request_culture_providers
    )
    fall_back_to_parent_cultures: bool = True
    fall_back_to_parent_ui_cultures: bool = True
    fall_back_to_default_culture: bool = True
    apply_current_culture_to_response_headers: bool = False

    def __post_init__(self):
        object.__setattr__(
            self,
            "supported_cultures",
            _normalize_supported(self.supported_cultures, "supported_cultures"),
        )
        object.__setattr__(
            self,
            "supported_ui_cultures",
            _normalize_supported(self.supported_ui_cultures, "supported_ui_cultures"),
        )
        object.__setattr__(
            self, "request_culture_providers", tuple(self.request_culture_providers)
        )

    def add_supported_cultures(self, *cultures: str) -> "RequestLocalizationOptions":
        """Return a copy with ``cultures`` appended to the supported cultures."""
        return replace(
            self, supported_cultures=(self.supported_cultures or ()) + cultures
        )

    def add_supported_ui_cultures(
        self, *ui_cultures: str
    ) -> "RequestLocalizationOptions":
        """Return a copy with ``ui_cultures`` appended to the supported UI cultures."""
        return replace(
            self,
            supported_ui_cultures=(self.supported_ui_cultures or ()) + ui_cultures,
        )

    def set_default_culture(
        self, culture: str, ui_culture: Optional[str] = None
    ) -> "RequestLocalizationOptions":
        """Return a copy with a new default request culture."""
        return replace(
            self, default_request_culture=RequestCulture(culture, ui_culture)
        )

    def add_initial_request_culture_provider(
        self, provider: RequestCultureProvider
    ) -> "RequestLocalizationOptions":
        """Return a copy with ``provider`` consulted before all others."""
        return replace(
            self,
            request_culture_providers=(provider,) + self.request_culture_providers,
        )
