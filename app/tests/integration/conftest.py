"""
Root-level conftest.py for integration tests.

Provides application builders for end-to-end request localization scenarios:
- Small FastAPI apps echoing the negotiated culture
- TestClient construction with specific localization options
"""

from typing import Callable, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.i18n import RequestLocalizationOptions
from infrastructure.services import RequestCultureDep, RequestCultureFeatureDep
from server.localization import RequestLocalizationMiddleware


def _echo(feature: RequestCultureFeatureDep):
    return {
        "culture": feature.request_culture.culture,
        "ui_culture": feature.request_culture.ui_culture,
        "provider": feature.provider_name,
    }


def _culture_pair(culture: RequestCultureDep):
    return {"culture": culture.culture, "ui_culture": culture.ui_culture}


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a TestClient for an app echoing the negotiated culture.

    Every app serves the echo endpoint on ``/page``, ``/{culture}/page`` and
    ``/{culture}/{ui_culture}/page``.
    ``/culture-pair`` returns only the RequestCulture.
    """

    def _make_client(
        options: Optional[RequestLocalizationOptions] = None,
    ) -> TestClient:
        app = FastAPI()
        app.add_middleware(RequestLocalizationMiddleware, options=options)
        app.add_api_route("/page", _echo)
        app.add_api_route("/{culture}/page", _echo)
        app.add_api_route("/{culture}/{ui_culture}/page", _echo)
        app.add_api_route("/culture-pair", _culture_pair)
        return TestClient(app)

    return _make_client
