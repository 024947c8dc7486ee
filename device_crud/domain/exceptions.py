"""
Error taxonomy for the device domain.

Every failure raised by the device use cases is a DeviceError tagged with an
ErrorKind. The API layer maps the kind to a status code in one table, so a new
kind only needs a new entry there.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Kinds
# -----------------------------------------------------------------------------


class ErrorKind(str, Enum):
    """Discriminant carried by every DeviceError."""

    # Validation
    INVALID_CREATION = "INVALID_CREATION"
    INVALID_STATE = "INVALID_STATE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_ID = "INVALID_ID"

    # State guard
    INVALID_UPDATE = "INVALID_UPDATE"
    INVALID_DELETION = "INVALID_DELETION"

    # Lookup
    DUPLICATE_DEVICE = "DUPLICATE_DEVICE"
    NOT_FOUND = "NOT_FOUND"

    # Storage and everything else
    STORAGE_FAILURE = "STORAGE_FAILURE"
    UNHANDLED = "UNHANDLED"


# -----------------------------------------------------------------------------
# Error
# -----------------------------------------------------------------------------


class DeviceError(Exception):
    """
    Single exception type for the device domain.

    Args:
        kind: What went wrong
        message: Human readable description, safe to return to clients
        cause: Text of the underlying error (storage failures)
        details: Extra context such as the device id
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __repr__(self) -> str:
        return f"DeviceError(kind={self.kind.value}, message={self.message!r}, cause={self.cause!r})"


def storage_failure(operation: str, exc: BaseException) -> DeviceError:
    """Wrap an underlying storage error, keeping its text as the cause"""
    return DeviceError(ErrorKind.STORAGE_FAILURE, operation, cause=str(exc))
