"""Tests for infrastructure.i18n.feature module."""

from types import SimpleNamespace

import pytest
from starlette.datastructures import State

from infrastructure.i18n import (
    CookieRequestCultureProvider,
    RequestCulture,
    RequestCultureFeature,
    get_request_culture_feature,
    set_request_culture_feature,
)


@pytest.mark.unit
class TestRequestCultureFeature:
    """Tests for the per-request culture carrier."""

    def test_provider_name(self):
        feature = RequestCultureFeature(
            RequestCulture("fr-FR"), provider=CookieRequestCultureProvider()
        )
        assert feature.provider_name == "CookieRequestCultureProvider"

    def test_provider_name_without_provider(self):
        assert RequestCultureFeature(RequestCulture("en-US")).provider_name is None

    @pytest.mark.parametrize("state", [SimpleNamespace(), State()])
    def test_set_and_get(self, state):
        feature = RequestCultureFeature(RequestCulture("fr-FR"))

        set_request_culture_feature(state, feature)

        assert get_request_culture_feature(state) is feature

    def test_get_before_set_returns_none(self):
        assert get_request_culture_feature(State()) is None

    def test_write_once(self):
        state = State()
        set_request_culture_feature(state, RequestCultureFeature(RequestCulture("fr")))

        with pytest.raises(RuntimeError):
            set_request_culture_feature(
                state, RequestCultureFeature(RequestCulture("de"))
            )

        assert get_request_culture_feature(state).request_culture.culture == "fr"
