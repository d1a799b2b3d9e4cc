"""Request culture negotiation.

Consults the configured providers in order and reconciles the first
non-empty result against the supported cultures:

1. First provider with any candidate wins (results are never merged)
2. Exact match, then parent cultures (if enabled), per dimension
3. Default culture (if enabled), otherwise negotiation fails

Culture and UI culture are resolved independently.
"""

from typing import Optional, Sequence, Tuple, Union

import structlog

from infrastructure.i18n.exceptions import RequestCultureNotSupportedError
from infrastructure.i18n.feature import RequestCultureFeature
from infrastructure.i18n.matcher import SupportedCultureMatcher
from infrastructure.i18n.models import (
    ProviderCultureResult,
    RequestCulture,
    RequestCultureContext,
)
from infrastructure.i18n.options import RequestLocalizationOptions
from infrastructure.i18n.providers import RequestCultureProvider
from infrastructure.operations import OperationResult

logger = structlog.get_logger().bind(component="i18n.negotiator")


class RequestCultureNegotiator:
    """Negotiates the RequestCulture for each request.

    Stateless apart from its immutable options, so a single instance can
    serve concurrent requests.

    Args:
        options: Localization options.
    """

    def __init__(self, options: RequestLocalizationOptions):
        self.options = options
        self._culture_matcher = SupportedCultureMatcher(options.supported_cultures)
        self._ui_culture_matcher = SupportedCultureMatcher(
            options.supported_ui_cultures
        )
        self.log = logger.bind(
            default_culture=options.default_request_culture.culture,
            default_ui_culture=options.default_request_culture.ui_culture,
        )

    async def _first_provider_result(
        self, context: RequestCultureContext
    ) -> Tuple[Optional[RequestCultureProvider], ProviderCultureResult]:
        for provider in self.options.request_culture_providers:
            result = await provider.determine_provider_culture_result(context)
            if result is not None and not result.is_empty:
                return provider, result
        return None, ProviderCultureResult()

    def _resolve_dimension(
        self,
        candidates: Sequence[str],
        matcher: SupportedCultureMatcher,
        allow_parent_fallback: bool,
        default: str,
        dimension: str,
    ) -> Optional[str]:
        """Resolve one dimension; None means strict-mode failure."""
        if not candidates:
            return default

        matched = matcher.match(candidates, allow_parent_fallback)
        if matched:
            return matched

        self.log.debug(
            "culture_candidate_unsupported",
            dimension=dimension,
            candidates=list(candidates),
        )
        if self.options.fall_back_to_default_culture:
            return default
        return None

    async def _negotiate(
        self, context: RequestCultureContext
    ) -> Union[RequestCultureFeature, RequestCultureNotSupportedError]:
        provider, result = await self._first_provider_result(context)
        default = self.options.default_request_culture

        culture = self._resolve_dimension(
            result.cultures,
            self._culture_matcher,
            self.options.fall_back_to_parent_cultures,
            default.culture,
            "culture",
        )
        ui_culture = self._resolve_dimension(
            result.ui_cultures,
            self._ui_culture_matcher,
            self.options.fall_back_to_parent_ui_cultures,
            default.ui_culture,
            "ui_culture",
        )

        if culture is None or ui_culture is None:
            return RequestCultureNotSupportedError(
                cultures=result.cultures if culture is None else (),
                ui_cultures=result.ui_cultures if ui_culture is None else (),
            )

        feature = RequestCultureFeature(
            request_culture=RequestCulture(culture, ui_culture),
            provider=provider,
        )
        self.log.debug(
            "request_culture_resolved",
            culture=culture,
            ui_culture=ui_culture,
            provider=feature.provider_name,
        )
        return feature

    async def negotiate(self, context: RequestCultureContext) -> OperationResult:
        """Negotiate the culture for a request.

        Args:
            context: Read-only request surface.

        Returns:
            OperationResult.success with a RequestCultureFeature as data, or a
            permanent error with error_code REQUEST_CULTURE_NOT_SUPPORTED when
            no supported culture matched and default fallback is disabled.
        """
        outcome = await self._negotiate(context)
        if isinstance(outcome, RequestCultureNotSupportedError):
            return OperationResult.permanent_error(
                message=str(outcome), error_code=outcome.error_code
            )
        return OperationResult.success(data=outcome, message="request culture resolved")

    async def resolve(self, context: RequestCultureContext) -> RequestCulture:
        """Negotiate the culture for a request, raising on failure.

        Raises:
            RequestCultureNotSupportedError: If no supported culture matched
                and default fallback is disabled.
        """
        outcome = await self._negotiate(context)
        if isinstance(outcome, RequestCultureNotSupportedError):
            raise outcome
        return outcome.request_culture
