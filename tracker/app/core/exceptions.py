"""
Custom exceptions for the parcel tracker.

Provides standardized error codes for storage and workflow failures.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class StorageError(AppException):
    """Raised when a statement or result read against the parcel table fails."""
    
    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            message=message,
            error_code="ERR_STORAGE_001",
            details=details
        )


class ParcelNotFoundError(AppException):
    """Raised when a workflow step references a parcel that does not exist."""
    
    def __init__(self, number: int):
        super().__init__(
            message=f"Parcel with number {number} not found",
            error_code="ERR_NOT_FOUND_001",
            details={"resource": "parcel", "number": number}
        )


class InvalidStatusTransitionError(AppException):
    """Raised when a parcel's current status forbids the requested change."""
    
    def __init__(self, number: int, status: str, action: str):
        super().__init__(
            message=f"Cannot {action} parcel {number} in status '{status}'",
            error_code="ERR_STATE_001",
            details={"number": number, "status": status, "action": action}
        )
