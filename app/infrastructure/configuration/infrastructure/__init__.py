"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.localization import (
    LocalizationSettings,
)

__all__ = [
    "LocalizationSettings",
]
