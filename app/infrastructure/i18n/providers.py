"""Request culture providers.

Each provider inspects one slice of the request context and proposes culture
candidates. Providers never raise for "not found": absence is returned as
None (or an empty ProviderCultureResult) so the negotiator can move on.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Tuple, Union

import structlog

from infrastructure.i18n.models import (
    ProviderCultureResult,
    RequestCulture,
    RequestCultureContext,
)

logger = structlog.get_logger().bind(component="i18n.providers")

DEFAULT_CULTURE_KEY = "culture"
DEFAULT_UI_CULTURE_KEY = "ui-culture"
DEFAULT_COOKIE_NAME = "request-culture"

_COOKIE_SEPARATOR = "|"
_CULTURE_PREFIX = "c="
_UI_CULTURE_PREFIX = "uic="

ProviderCallback = Callable[
    [RequestCultureContext],
    Union[Optional[ProviderCultureResult], Awaitable[Optional[ProviderCultureResult]]],
]


class RequestCultureProvider(ABC):
    """Base class for request culture providers.

    Subclasses implement determine_provider_culture_result() for a single
    source of culture information (route, query string, cookie, header...).
    """

    @property
    def name(self) -> str:
        """Provider name used for diagnostics."""
        return type(self).__name__

    @abstractmethod
    async def determine_provider_culture_result(
        self, context: RequestCultureContext
    ) -> Optional[ProviderCultureResult]:
        """Propose culture candidates for the request.

        Args:
            context: Read-only request surface.

        Returns:
            ProviderCultureResult with candidates, or None when the provider
            has nothing to say about this request.
        """

    def __repr__(self) -> str:
        return f"{self.name}()"


def _get_case_insensitive(values: Mapping[str, Any], key: str) -> Optional[str]:
    if key in values:
        value = values[key]
    else:
        lowered = key.lower()
        value = next(
            (v for k, v in values.items() if str(k).lower() == lowered),
            None,
        )
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class _KeyedRequestCultureProvider(RequestCultureProvider):
    """Provider reading a culture and a UI culture from two named values."""

    def __init__(
        self,
        culture_key: str = DEFAULT_CULTURE_KEY,
        ui_culture_key: str = DEFAULT_UI_CULTURE_KEY,
    ):
        self.culture_key = culture_key
        self.ui_culture_key = ui_culture_key

    def _source(self, context: RequestCultureContext) -> Mapping[str, Any]:
        raise NotImplementedError

    async def determine_provider_culture_result(
        self, context: RequestCultureContext
    ) -> Optional[ProviderCultureResult]:
        values = self._source(context)
        if not values:
            return None

        culture = _get_case_insensitive(values, self.culture_key)
        ui_culture = _get_case_insensitive(values, self.ui_culture_key)
        if culture is None and ui_culture is None:
            return None

        return ProviderCultureResult(cultures=culture, ui_cultures=ui_culture)

    def __repr__(self) -> str:
        return (
            f"{self.name}(culture_key={self.culture_key!r}, "
            f"ui_culture_key={self.ui_culture_key!r})"
        )


class RouteDataRequestCultureProvider(_KeyedRequestCultureProvider):
    """Reads cultures from route values (e.g., ``/{culture}/{ui-culture}/page``).

    Route keys are matched case-insensitively.
    """

    def _source(self, context: RequestCultureContext) -> Mapping[str, Any]:
        return context.route_values


class QueryStringRequestCultureProvider(_KeyedRequestCultureProvider):
    """Reads cultures from query parameters (e.g., ``?culture=fr-FR&ui-culture=fr``)."""

    def _source(self, context: RequestCultureContext) -> Mapping[str, Any]:
        return context.query_params


def make_cookie_value(request_culture: RequestCulture) -> str:
    """Encode a RequestCulture as a culture cookie value.

    Example:
        >>> make_cookie_value(RequestCulture("ar-SA", "ar-YE"))
        'c=ar-SA|uic=ar-YE'
    """
    return (
        f"{_CULTURE_PREFIX}{request_culture.culture}"
        f"{_COOKIE_SEPARATOR}"
        f"{_UI_CULTURE_PREFIX}{request_culture.ui_culture}"
    )


def parse_cookie_value(value: Optional[str]) -> Optional[ProviderCultureResult]:
    """Decode a ``c=<culture>|uic=<ui-culture>`` cookie value.

    A missing or malformed field yields no candidate for that dimension only.

    Returns:
        ProviderCultureResult, or None if neither field could be decoded.
    """
    if not value:
        return None

    culture: Optional[str] = None
    ui_culture: Optional[str] = None
    for part in value.split(_COOKIE_SEPARATOR):
        part = part.strip()
        if part.startswith(_UI_CULTURE_PREFIX):
            ui_culture = part[len(_UI_CULTURE_PREFIX) :].strip() or None
        elif part.startswith(_CULTURE_PREFIX):
            culture = part[len(_CULTURE_PREFIX) :].strip() or None

    if culture is None and ui_culture is None:
        logger.debug("cookie_value_malformed", value=value[:64])
        return None

    return ProviderCultureResult(cultures=culture, ui_cultures=ui_culture)


class CookieRequestCultureProvider(RequestCultureProvider):
    """Reads cultures from a cookie encoded as ``c=<culture>|uic=<ui-culture>``."""

    def __init__(self, cookie_name: str = DEFAULT_COOKIE_NAME):
        self.cookie_name = cookie_name

    async def determine_provider_culture_result(
        self, context: RequestCultureContext
    ) -> Optional[ProviderCultureResult]:
        value = context.cookies.get(self.cookie_name)
        if not value:
            return None
        return parse_cookie_value(value)

    def __repr__(self) -> str:
        return f"{self.name}(cookie_name={self.cookie_name!r})"


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into language ranges by preference.

    Ranges are ordered by descending quality, keeping header order for equal
    weights. Wildcards and ``q=0`` ranges are dropped; a malformed weight
    counts as 1.0.

    Example:
        >>> parse_accept_language("en-US,en;q=0.9,fr-FR;q=0.95")
        ['en-US', 'fr-FR', 'en']
    """
    if not header:
        return []

    preferences: List[Tuple[str, float]] = []
    for segment in header.split(","):
        params = segment.split(";")
        lang_range = params[0].strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        for param in params[1:]:
            param_name, _, param_value = param.strip().partition("=")
            if param_name.strip().lower() != "q":
                continue
            try:
                quality = float(param_value.strip())
            except ValueError:
                quality = 1.0

        if quality <= 0:
            continue
        preferences.append((lang_range, quality))

    # sorted() is stable, so equal weights keep header order
    return [lang for lang, _ in sorted(preferences, key=lambda p: p[1], reverse=True)]


class AcceptLanguageHeaderRequestCultureProvider(RequestCultureProvider):
    """Uses the Accept-Language ranges as candidates for both dimensions.

    Args:
        maximum_values_to_try: Number of leading ranges to consider.
    """

    def __init__(self, maximum_values_to_try: int = 3):
        self.maximum_values_to_try = maximum_values_to_try

    async def determine_provider_culture_result(
        self, context: RequestCultureContext
    ) -> Optional[ProviderCultureResult]:
        languages = list(context.accept_languages)
        if self.maximum_values_to_try > 0:
            languages = languages[: self.maximum_values_to_try]
        if not languages:
            return None
        return ProviderCultureResult(cultures=languages, ui_cultures=languages)

    def __repr__(self) -> str:
        return f"{self.name}(maximum_values_to_try={self.maximum_values_to_try})"


class CustomRequestCultureProvider(RequestCultureProvider):
    """Wraps a caller-supplied function for arbitrary culture detection.

    The callback may be a plain function or a coroutine function.

    Example:
        def from_path(context):
            segment = context.path.strip("/").split("/")[0]
            return ProviderCultureResult(segment, segment) if len(segment) == 2 else None

        provider = CustomRequestCultureProvider(from_path)
    """

    def __init__(self, callback: ProviderCallback, name: Optional[str] = None):
        self._callback = callback
        self._name = name or getattr(callback, "__name__", type(self).__name__)

    @property
    def name(self) -> str:
        return self._name

    async def determine_provider_culture_result(
        self, context: RequestCultureContext
    ) -> Optional[ProviderCultureResult]:
        result = self._callback(context)
        if inspect.isawaitable(result):
            result = await result
        return result
