"""Operation status enumeration.

Status codes for operation results, used to tell a completed operation from
one that failed in a way the caller must not retry or paper over.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Non-retryable error (unsupported input, strict-mode rejection)
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
