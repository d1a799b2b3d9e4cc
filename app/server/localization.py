"""Request localization middleware.

Negotiates the culture of every request before it reaches the routes and
attaches the result to ``request.state``.
"""

from typing import Any, Dict, Mapping, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from infrastructure.i18n import (
    RequestCultureContext,
    RequestCultureFeature,
    RequestCultureNegotiator,
    RequestLocalizationOptions,
    parse_accept_language,
    set_request_culture_feature,
)
from infrastructure.logging import (
    bind_culture_context,
    bind_request_context,
    get_module_logger,
)

logger = get_module_logger()


def _match_route_values(request: Request) -> Dict[str, Any]:
    """Return the path params of the route that will serve the request.

    Middleware runs before routing, so the app's routes are matched here.
    """
    if request.scope.get("path_params"):
        return dict(request.path_params)

    app = request.scope.get("app")
    router = getattr(app, "router", None)
    for route in getattr(router, "routes", []):
        match, child_scope = route.matches(request.scope)
        if match == Match.FULL:
            return dict(child_scope.get("path_params", {}))
    return {}


def build_request_context(
    request: Request, route_values: Optional[Mapping[str, Any]] = None
) -> RequestCultureContext:
    """Build the read-only culture context for a Starlette request.

    Args:
        request: Incoming request.
        route_values: Route values to use instead of matching the app router.
    """
    if route_values is None:
        route_values = _match_route_values(request)

    return RequestCultureContext(
        route_values=dict(route_values),
        query_params=dict(request.query_params),
        cookies=dict(request.cookies),
        accept_languages=tuple(
            parse_accept_language(request.headers.get("accept-language"))
        ),
        path=request.url.path,
        request=request,
    )


class RequestLocalizationMiddleware(BaseHTTPMiddleware):
    """Negotiates the request culture and exposes it to downstream handlers.

    Args:
        app: ASGI application.
        options: Localization options. Ignored when ``negotiator`` is given.
        negotiator: Pre-built negotiator.
    """

    def __init__(
        self,
        app,
        options: Optional[RequestLocalizationOptions] = None,
        negotiator: Optional[RequestCultureNegotiator] = None,
    ):
        super().__init__(app)
        if negotiator is None:
            negotiator = RequestCultureNegotiator(
                options or RequestLocalizationOptions()
            )
        self.negotiator = negotiator

    @property
    def options(self) -> RequestLocalizationOptions:
        return self.negotiator.options

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
        ):
            result = await self.negotiator.negotiate(build_request_context(request))
            if not result.is_success:
                logger.error(
                    "request_culture_not_supported",
                    error=result.message,
                    error_code=result.error_code,
                )
                return JSONResponse(
                    status_code=500,
                    content={"message": result.message, "error_code": result.error_code},
                )

            feature: RequestCultureFeature = result.data
            set_request_culture_feature(request.state, feature)
            request_culture = feature.request_culture

            with bind_culture_context(
                request_culture.culture, request_culture.ui_culture
            ):
                response = await call_next(request)

            if self.options.apply_current_culture_to_response_headers:
                response.headers["Content-Language"] = request_culture.culture
            return response
