"""
Error handling decorators and utilities for API endpoints.

Domain failures carry a reason code decided where they were raised; this
module maps exception types to HTTP status codes and never inspects message
text.
"""

import inspect
import logging
from functools import wraps
from typing import Callable

from fastapi import HTTPException

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    ConfigurationError,
    ConflictError,
    CorruptRecordError,
    DatabaseError,
    DomainError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching type wins
_DOMAIN_STATUS = (
    (ValidationError, HTTPStatus.BAD_REQUEST),
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (ConflictError, HTTPStatus.CONFLICT),
    (InvalidStateError, HTTPStatus.CONFLICT),
)


def error_detail(error: DomainError) -> dict:
    """Response body for a domain failure."""
    return {"message": error.message, "reason": error.reason.value}


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Translate an exception raised below the API layer into an HTTPException.

    Args:
        operation_name: Human-readable name of the operation, used in logs
        error: The exception to translate

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, DomainError):
        for error_type, status_code in _DOMAIN_STATUS:
            if isinstance(error, error_type):
                logger.warning(f"{operation_name} - {error.reason.value}: {error.message}")
                return HTTPException(status_code=status_code, detail=error_detail(error))

    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail=f"Database operation failed: {error.message}"
        )

    if isinstance(error, CorruptRecordError):
        logger.error(f"{operation_name} - Corrupt record {error.details.get('record_id')}: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: stored data is inconsistent"
        )

    if isinstance(error, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: server misconfigured"
        )

    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle application errors consistently across endpoints.

    Status mapping:
        ValidationError -> 400
        NotFoundError -> 404
        ConflictError, InvalidStateError -> 409
        DatabaseError -> 503
        CorruptRecordError -> 500
        other errors -> 500

    Args:
        operation_name: Human-readable name of the operation (e.g., "Rent vehicle")

    Example:
        @router.post("/rent")
        @handle_api_errors("Rent vehicle")
        def rent_vehicle(...):
            return service.rent_vehicle(...)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
