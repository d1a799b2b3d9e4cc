"""Per-request carrier for the negotiated culture."""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.i18n.models import RequestCulture
from infrastructure.i18n.providers import RequestCultureProvider

REQUEST_CULTURE_STATE_KEY = "request_culture_feature"


@dataclass(frozen=True)
class RequestCultureFeature:
    """Resolved culture for a request plus its provenance.

    Attributes:
        request_culture: The negotiated culture pair.
        provider: Provider whose candidates won negotiation, or None when
            no provider had an opinion. Diagnostic only.
    """

    request_culture: RequestCulture
    provider: Optional[RequestCultureProvider] = None

    @property
    def provider_name(self) -> Optional[str]:
        return self.provider.name if self.provider else None


def set_request_culture_feature(state: Any, feature: RequestCultureFeature) -> None:
    """Attach the feature to a per-request state object. Write-once.

    Args:
        state: Request-scoped state (e.g., Starlette ``request.state``).
        feature: Negotiated culture feature.

    Raises:
        RuntimeError: If a feature is already attached to this request.
    """
    if getattr(state, REQUEST_CULTURE_STATE_KEY, None) is not None:
        raise RuntimeError("Request culture has already been set for this request")
    setattr(state, REQUEST_CULTURE_STATE_KEY, feature)


def get_request_culture_feature(state: Any) -> Optional[RequestCultureFeature]:
    """Return the feature attached to a per-request state object, if any."""
    return getattr(state, REQUEST_CULTURE_STATE_KEY, None)
