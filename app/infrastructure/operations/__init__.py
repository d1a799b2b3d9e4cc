"""Operation result types and status enums.

This module contains standardized result types for operations across
the application, such as the outcome of request culture negotiation.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
