"""Request localization infrastructure settings."""

from typing import List, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


def _split_cultures(value: str) -> Optional[List[str]]:
    names = [name.strip() for name in value.split(",") if name.strip()]
    return names or None


class LocalizationSettings(InfrastructureSettings):
    """Request culture negotiation configuration.

    Environment Variables:
        LOCALIZATION_DEFAULT_CULTURE: Default culture (default: en-US)
        LOCALIZATION_DEFAULT_UI_CULTURE: Default UI culture (default: same as culture)
        LOCALIZATION_SUPPORTED_CULTURES: Comma-separated supported cultures
            (empty means no restriction)
        LOCALIZATION_SUPPORTED_UI_CULTURES: Comma-separated supported UI cultures
            (empty means no restriction)
        LOCALIZATION_FALL_BACK_TO_PARENT_CULTURES: Try parent cultures (default: true)
        LOCALIZATION_FALL_BACK_TO_PARENT_UI_CULTURES: Try parent UI cultures (default: true)
        LOCALIZATION_FALL_BACK_TO_DEFAULT_CULTURE: Use the default when nothing
            matches; false enables strict mode (default: true)
        LOCALIZATION_APPLY_CULTURE_TO_RESPONSE_HEADERS: Set Content-Language (default: false)
        LOCALIZATION_USE_ROUTE_DATA: Consult route values first (default: false)
        LOCALIZATION_ROUTE_DATA_KEY: Route key for culture (default: culture)
        LOCALIZATION_UI_ROUTE_DATA_KEY: Route key for UI culture (default: ui-culture)
        LOCALIZATION_QUERY_STRING_KEY: Query key for culture (default: culture)
        LOCALIZATION_UI_QUERY_STRING_KEY: Query key for UI culture (default: ui-culture)
        LOCALIZATION_COOKIE_NAME: Culture cookie name (default: request-culture)
        LOCALIZATION_MAX_ACCEPT_LANGUAGE_VALUES: Accept-Language ranges to try (default: 3)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if not settings.localization.fall_back_to_default_culture:
            # Strict mode...
        supported = settings.localization.supported_cultures
        ```
    """

    default_culture: str = Field(default="en-US", alias="LOCALIZATION_DEFAULT_CULTURE")
    default_ui_culture: Optional[str] = Field(
        default=None, alias="LOCALIZATION_DEFAULT_UI_CULTURE"
    )
    supported_cultures_raw: str = Field(
        default="", alias="LOCALIZATION_SUPPORTED_CULTURES"
    )
    supported_ui_cultures_raw: str = Field(
        default="", alias="LOCALIZATION_SUPPORTED_UI_CULTURES"
    )
    fall_back_to_parent_cultures: bool = Field(
        default=True, alias="LOCALIZATION_FALL_BACK_TO_PARENT_CULTURES"
    )
    fall_back_to_parent_ui_cultures: bool = Field(
        default=True, alias="LOCALIZATION_FALL_BACK_TO_PARENT_UI_CULTURES"
    )
    fall_back_to_default_culture: bool = Field(
        default=True, alias="LOCALIZATION_FALL_BACK_TO_DEFAULT_CULTURE"
    )
    apply_culture_to_response_headers: bool = Field(
        default=False, alias="LOCALIZATION_APPLY_CULTURE_TO_RESPONSE_HEADERS"
    )
    use_route_data: bool = Field(default=False, alias="LOCALIZATION_USE_ROUTE_DATA")
    route_data_key: str = Field(default="culture", alias="LOCALIZATION_ROUTE_DATA_KEY")
    ui_route_data_key: str = Field(
        default="ui-culture", alias="LOCALIZATION_UI_ROUTE_DATA_KEY"
    )
    query_string_key: str = Field(
        default="culture", alias="LOCALIZATION_QUERY_STRING_KEY"
    )
    ui_query_string_key: str = Field(
        default="ui-culture", alias="LOCALIZATION_UI_QUERY_STRING_KEY"
    )
    cookie_name: str = Field(default="request-culture", alias="LOCALIZATION_COOKIE_NAME")
    max_accept_language_values: int = Field(
        default=3, ge=0, alias="LOCALIZATION_MAX_ACCEPT_LANGUAGE_VALUES"
    )

    @field_validator("default_ui_culture", mode="before")
    @classmethod
    def _empty_ui_culture_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty LOCALIZATION_DEFAULT_UI_CULTURE as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def supported_cultures(self) -> Optional[List[str]]:
        """Supported cultures, or None when unrestricted."""
        return _split_cultures(self.supported_cultures_raw)

    @property
    def supported_ui_cultures(self) -> Optional[List[str]]:
        """Supported UI cultures, or None when unrestricted."""
        return _split_cultures(self.supported_ui_cultures_raw)
