import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import structlog

from infrastructure.services import providers as service_providers


@pytest.fixture(autouse=True)
def clear_service_caches():
    """Reset the application-scoped singletons between tests."""
    service_providers.get_settings.cache_clear()
    service_providers.get_localization_options.cache_clear()
    service_providers.get_request_culture_negotiator.cache_clear()
    yield
    service_providers.get_settings.cache_clear()
    service_providers.get_localization_options.cache_clear()
    service_providers.get_request_culture_negotiator.cache_clear()


@pytest.fixture(autouse=True)
def clear_logging_context():
    """Prevent structlog context variables leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
