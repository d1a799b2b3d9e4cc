"""Feature-level fixtures for request localization tests.

Provides request contexts and option sets shared by provider, matcher and
negotiator scenarios.
"""

import pytest

from infrastructure.i18n import RouteDataRequestCultureProvider
from tests.factories.i18n import make_localization_options, make_request_culture_context


@pytest.fixture
def empty_context():
    """Request context with no culture information at all."""
    return make_request_culture_context()


@pytest.fixture
def arabic_options():
    """Options supporting ar-SA cultures and ar-YE UI cultures, default en-US."""
    return make_localization_options(
        supported_cultures=["ar-SA"],
        supported_ui_cultures=["ar-YE"],
        providers=[RouteDataRequestCultureProvider()],
    )


@pytest.fixture
def strict_options():
    """Strict-mode options: only ar-SA supported, no default fallback."""
    return make_localization_options(
        supported_cultures=["ar-SA"],
        supported_ui_cultures=["ar-SA"],
        providers=[RouteDataRequestCultureProvider()],
        fall_back_to_default_culture=False,
    )
