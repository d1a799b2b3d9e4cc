"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LocalizationOptionsDep,
    RequestCultureNegotiatorDep,
    RequestCultureFeatureDep,
    RequestCultureDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_localization_options,
    get_request_culture_negotiator,
)

__all__ = [
    "SettingsDep",
    "LocalizationOptionsDep",
    "RequestCultureNegotiatorDep",
    "RequestCultureFeatureDep",
    "RequestCultureDep",
    "get_settings",
    "get_localization_options",
    "get_request_culture_negotiator",
]
