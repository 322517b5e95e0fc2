"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. Each domain failure
carries an ErrorReason so callers never need to inspect message text.
"""

from constants import ErrorReason


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DomainError(ApplicationError):
    """Base class for business-rule failures tagged with a reason code"""

    default_reason = ErrorReason.INVALID_INPUT

    def __init__(self, message: str, reason: ErrorReason | None = None, details: dict | None = None):
        self.reason = reason or self.default_reason
        super().__init__(message, details)


class ValidationError(DomainError):
    """Raised when input is malformed or missing"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, ErrorReason.INVALID_INPUT, details)


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist"""

    default_reason = ErrorReason.VEHICLE_NOT_FOUND


class ConflictError(DomainError):
    """Raised when an operation violates a business invariant given current state"""


class InvalidStateError(DomainError):
    """Raised by an entity when a state transition is not allowed"""


class CorruptRecordError(ApplicationError):
    """Raised when a stored record violates an invariant the domain relies on"""

    def __init__(self, record_id: str, message: str):
        super().__init__(message, {"record_id": record_id})


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
