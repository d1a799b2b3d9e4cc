"""Infrastructure modules for the localization service.

Centralized infrastructure components:
- configuration: Settings management (settings, LocalizationSettings)
- logging: Structured logging and request context (get_module_logger, logger)
- i18n: Request culture negotiation
- operations: Operation results
- services: Dependency injection services (SettingsDep, RequestCultureDep, get_settings)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger
from infrastructure.logging.setup import logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Dependency Injection Services
from infrastructure.services import (
    SettingsDep,
    LocalizationOptionsDep,
    RequestCultureDep,
    get_settings,
    get_localization_options,
)

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    "logger",
    # Operations
    "OperationResult",
    "OperationStatus",
    # Dependency Injection Services
    "SettingsDep",
    "LocalizationOptionsDep",
    "RequestCultureDep",
    "get_settings",
    "get_localization_options",
]
