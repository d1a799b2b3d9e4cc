"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    StubRequestCultureProvider,
    make_localization_options,
    make_provider_culture_result,
    make_request_culture_context,
    make_stub_provider,
)

__all__ = [
    "StubRequestCultureProvider",
    "make_localization_options",
    "make_provider_culture_result",
    "make_request_culture_context",
    "make_stub_provider",
]
