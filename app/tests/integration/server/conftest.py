"""Fixtures for application-level integration tests."""

import pytest
from fastapi.testclient import TestClient

from server.server import create_app


@pytest.fixture
def app_client(monkeypatch):
    """TestClient for a freshly built application.

    Environment set with ``monkeypatch.setenv`` before requesting this
    fixture is picked up by the application settings.
    """
    monkeypatch.setenv("PREFIX", "test-")
    return TestClient(create_app())


@pytest.fixture
def bilingual_env(monkeypatch):
    """Restrict the application to Canadian English and French."""
    monkeypatch.setenv("LOCALIZATION_DEFAULT_CULTURE", "en-CA")
    monkeypatch.setenv("LOCALIZATION_SUPPORTED_CULTURES", "en-CA,fr-CA")
    monkeypatch.setenv("LOCALIZATION_SUPPORTED_UI_CULTURES", "en-CA,fr-CA,fr")


@pytest.fixture
def strict_env(monkeypatch):
    """Only en-US supported and no fallback to the default culture."""
    monkeypatch.setenv("LOCALIZATION_SUPPORTED_CULTURES", "en-US")
    monkeypatch.setenv("LOCALIZATION_FALL_BACK_TO_DEFAULT_CULTURE", "false")
