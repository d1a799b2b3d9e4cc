"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import (
    RequestCulture,
    RequestCultureFeature,
    RequestCultureNegotiator,
    RequestLocalizationOptions,
    get_request_culture_feature,
)
from infrastructure.services.providers import (
    get_settings,
    get_localization_options,
    get_request_culture_negotiator,
)


def get_current_request_culture_feature(request: Request) -> RequestCultureFeature:
    """Return the culture negotiated for the current request.

    Raises:
        HTTPException: 500 if the localization middleware is not installed.
    """
    feature = get_request_culture_feature(request.state)
    if feature is None:
        raise HTTPException(
            status_code=500,
            detail="Request culture is not available; is RequestLocalizationMiddleware installed?",
        )
    return feature


def get_current_request_culture(
    feature: Annotated[
        RequestCultureFeature, Depends(get_current_request_culture_feature)
    ],
) -> RequestCulture:
    return feature.request_culture


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Localization options dependency
LocalizationOptionsDep = Annotated[
    RequestLocalizationOptions, Depends(get_localization_options)
]

# Negotiator dependency
RequestCultureNegotiatorDep = Annotated[
    RequestCultureNegotiator, Depends(get_request_culture_negotiator)
]

# Negotiated culture of the current request
# Usage: def handler(culture: RequestCultureDep): culture.ui_culture
RequestCultureFeatureDep = Annotated[
    RequestCultureFeature, Depends(get_current_request_culture_feature)
]
RequestCultureDep = Annotated[RequestCulture, Depends(get_current_request_culture)]

__all__ = [
    "SettingsDep",
    "LocalizationOptionsDep",
    "RequestCultureNegotiatorDep",
    "RequestCultureFeatureDep",
    "RequestCultureDep",
]
