from typing import Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from infrastructure.i18n import (
    RequestCulture,
    SupportedCultureMatcher,
    is_valid_culture_name,
    make_cookie_value,
)
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    LocalizationOptionsDep,
    RequestCultureFeatureDep,
    SettingsDep,
)

logger = get_module_logger()
router = APIRouter(tags=["Localization"])

CULTURE_COOKIE_MAX_AGE = 365 * 24 * 60 * 60


class CultureSelection(BaseModel):
    culture: str
    ui_culture: Optional[str] = None


class CultureResponse(BaseModel):
    culture: str
    ui_culture: str
    provider: Optional[str] = None


def _require_supported(name: str, supported, field: str) -> str:
    if not is_valid_culture_name(name):
        raise HTTPException(status_code=422, detail=f"Invalid {field}: {name!r}")
    matched = SupportedCultureMatcher(supported).lookup(name)
    if matched is None:
        raise HTTPException(status_code=422, detail=f"Unsupported {field}: {name!r}")
    return matched


@router.get("/culture", response_model=CultureResponse)
def get_culture(feature: RequestCultureFeatureDep):
    """Return the culture negotiated for this request."""
    request_culture = feature.request_culture
    return CultureResponse(
        culture=request_culture.culture,
        ui_culture=request_culture.ui_culture,
        provider=feature.provider_name,
    )


@router.post("/culture", response_model=CultureResponse)
def set_culture(
    selection: CultureSelection,
    response: Response,
    options: LocalizationOptionsDep,
    settings: SettingsDep,
):
    """Persist a culture choice in the culture cookie.

    The stored pair is used by the cookie provider on subsequent requests.
    """
    culture = _require_supported(
        selection.culture, options.supported_cultures, "culture"
    )
    ui_culture = _require_supported(
        selection.ui_culture or culture, options.supported_ui_cultures, "ui_culture"
    )
    request_culture = RequestCulture(culture, ui_culture)

    response.set_cookie(
        key=settings.localization.cookie_name,
        value=make_cookie_value(request_culture),
        max_age=CULTURE_COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    logger.info(
        "culture_cookie_set",
        culture=request_culture.culture,
        ui_culture=request_culture.ui_culture,
    )
    return CultureResponse(
        culture=request_culture.culture, ui_culture=request_culture.ui_culture
    )
