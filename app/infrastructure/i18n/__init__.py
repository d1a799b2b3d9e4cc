"""i18n system - request culture negotiation.

Determines, for each request, the culture and UI culture that govern
processing by consulting an ordered chain of culture providers and
reconciling the first result against the supported cultures.

Main components:
- cultures: culture name syntax, canonical casing and parent chains
- models: RequestCulture, ProviderCultureResult, RequestCultureContext
- providers: route data, query string, cookie, Accept-Language and custom providers
- matcher: SupportedCultureMatcher with hierarchical fallback
- options: RequestLocalizationOptions
- negotiator: RequestCultureNegotiator
- feature: RequestCultureFeature, the per-request result carrier
"""

from infrastructure.i18n.cultures import (
    culture_hierarchy,
    is_valid_culture_name,
    normalize_culture_name,
    parent_culture,
)
from infrastructure.i18n.exceptions import (
    LocalizationError,
    RequestCultureNotSupportedError,
)
from infrastructure.i18n.feature import (
    RequestCultureFeature,
    get_request_culture_feature,
    set_request_culture_feature,
)
from infrastructure.i18n.matcher import SupportedCultureMatcher, match_culture
from infrastructure.i18n.models import (
    ProviderCultureResult,
    RequestCulture,
    RequestCultureContext,
)
from infrastructure.i18n.negotiator import RequestCultureNegotiator
from infrastructure.i18n.options import RequestLocalizationOptions
from infrastructure.i18n.providers import (
    AcceptLanguageHeaderRequestCultureProvider,
    CookieRequestCultureProvider,
    CustomRequestCultureProvider,
    QueryStringRequestCultureProvider,
    RequestCultureProvider,
    RouteDataRequestCultureProvider,
    make_cookie_value,
    parse_accept_language,
    parse_cookie_value,
)

__all__ = [
    "RequestCulture",
    "ProviderCultureResult",
    "RequestCultureContext",
    "RequestLocalizationOptions",
    "RequestCultureNegotiator",
    "RequestCultureFeature",
    "get_request_culture_feature",
    "set_request_culture_feature",
    "SupportedCultureMatcher",
    "match_culture",
    "RequestCultureProvider",
    "RouteDataRequestCultureProvider",
    "QueryStringRequestCultureProvider",
    "CookieRequestCultureProvider",
    "AcceptLanguageHeaderRequestCultureProvider",
    "CustomRequestCultureProvider",
    "make_cookie_value",
    "parse_cookie_value",
    "parse_accept_language",
    "is_valid_culture_name",
    "normalize_culture_name",
    "parent_culture",
    "culture_hierarchy",
    "LocalizationError",
    "RequestCultureNotSupportedError",
]
