"""Fixtures for server module unit tests."""

from typing import Dict, Optional

import pytest
from fastapi import FastAPI
from starlette.requests import Request


@pytest.fixture
def routed_app():
    """FastAPI application with culture route templates."""
    app = FastAPI()

    @app.get("/{culture}/page")
    def culture_page():
        return {}

    @app.get("/plain")
    def plain():
        return {}

    return app


@pytest.fixture
def make_request(routed_app):
    """Build a Starlette request bound to ``routed_app``."""

    def _make_request(
        path: str = "/plain",
        query_string: str = "",
        headers: Optional[Dict[str, str]] = None,
        method: str = "GET",
    ) -> Request:
        scope = {
            "type": "http",
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (name.lower().encode(), value.encode())
                for name, value in (headers or {}).items()
            ],
            "app": routed_app,
        }
        return Request(scope)

    return _make_request
