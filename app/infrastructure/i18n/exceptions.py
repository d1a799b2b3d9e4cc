"""Custom exceptions for the request localization system."""

from typing import Sequence, Tuple


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            culture = await negotiator.resolve(context)
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class RequestCultureNotSupportedError(LocalizationError):
    """Raised when no supported culture could be determined for a request
    and fallback to the default culture is disabled.

    Attributes:
        cultures: Rejected culture candidates (empty if that dimension resolved).
        ui_cultures: Rejected UI culture candidates (empty if that dimension resolved).
    """

    error_code = "REQUEST_CULTURE_NOT_SUPPORTED"

    def __init__(
        self,
        cultures: Sequence[str] = (),
        ui_cultures: Sequence[str] = (),
    ):
        self.cultures: Tuple[str, ...] = tuple(cultures)
        self.ui_cultures: Tuple[str, ...] = tuple(ui_cultures)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        rejected = []
        if self.cultures:
            rejected.append(f"cultures {list(self.cultures)}")
        if self.ui_cultures:
            rejected.append(f"UI cultures {list(self.ui_cultures)}")
        detail = f": {' and '.join(rejected)}" if rejected else ""
        return (
            "No supported culture could be determined for the request and "
            f"fallback to the default culture is disabled{detail}"
        )
