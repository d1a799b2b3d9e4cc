"""Request culture models for the i18n system.

Defines the immutable values exchanged between culture providers, the
negotiator and downstream request processing.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

from infrastructure.i18n.cultures import normalize_culture_name


@dataclass(frozen=True)
class RequestCulture:
    """Resolved culture pair for a request.

    Attributes:
        culture: Culture used for content formatting (dates, numbers).
        ui_culture: Culture used for UI string selection. Defaults to
            ``culture`` when omitted.

    Example:
        >>> RequestCulture("fr-FR")
        RequestCulture(culture='fr-FR', ui_culture='fr-FR')
    """

    culture: str
    ui_culture: Optional[str] = None

    def __post_init__(self):
        culture = normalize_culture_name(self.culture)
        ui_culture = normalize_culture_name(self.ui_culture or culture)
        object.__setattr__(self, "culture", culture)
        object.__setattr__(self, "ui_culture", ui_culture)


def _as_candidates(values: Optional[Sequence[str]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    return tuple(value.strip() for value in values if value and value.strip())


@dataclass(frozen=True, init=False)
class ProviderCultureResult:
    """Raw culture candidates produced by a single provider.

    Either sequence may be empty, meaning the provider has no opinion on that
    dimension. Candidates are unvalidated and kept in preference order.

    Attributes:
        cultures: Candidate culture names.
        ui_cultures: Candidate UI culture names.
    """

    cultures: Tuple[str, ...] = ()
    ui_cultures: Tuple[str, ...] = ()

    def __init__(
        self,
        cultures: Optional[Sequence[str]] = None,
        ui_cultures: Optional[Sequence[str]] = None,
    ):
        object.__setattr__(self, "cultures", _as_candidates(cultures))
        object.__setattr__(self, "ui_cultures", _as_candidates(ui_cultures))

    @property
    def is_empty(self) -> bool:
        """True when the provider offered no candidate for either dimension."""
        return not self.cultures and not self.ui_cultures


@dataclass(frozen=True)
class RequestCultureContext:
    """Read-only view of the request surface consulted by culture providers.

    Attributes:
        route_values: Matched route values (path parameters).
        query_params: Query string parameters.
        cookies: Request cookies by name.
        accept_languages: Accept-Language ranges, already sorted by quality.
        path: Request path.
        request: The underlying transport request, for custom providers.
    """

    route_values: Mapping[str, Any] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    accept_languages: Tuple[str, ...] = ()
    path: str = "/"
    request: Optional[Any] = field(default=None, compare=False, repr=False)
