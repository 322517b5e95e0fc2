"""
Structured Logging Utilities

Provides logging setup and utilities for adding structured context to log
messages, improving observability and debugging.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from config.settings import Settings
from constants import LogConfig
from exceptions import DomainError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names lifted into the log context by log_operation
_CONTEXT_ARGUMENTS = ("vehicle_id", "customer_id", "license_plate", "status")


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger: console always, rotating file when LOG_DIR is set.

    Safe to call more than once; handlers installed by a previous call are replaced.
    """
    log_formatter = logging.Formatter(LogConfig.FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    for handler in [h for h in root_logger.handlers if getattr(h, "_vehicle_rental", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler._vehicle_rental = True
    root_logger.addHandler(console_handler)

    if settings.log_dir:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = settings.log_dir / LogConfig.FILE_NAME
        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LogConfig.MAX_BYTES,
            backupCount=LogConfig.BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler._vehicle_rental = True
        root_logger.addHandler(file_handler)
        logging.getLogger(__name__).info(f"Logging initialized: {log_file}")


class StructuredLogger:
    """
    Logger that merges the request context into every record's extra fields.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Vehicle rented", extra={"vehicle_id": str(vehicle.id)})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def log(self, level: int, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        fields = get_logging_context()
        fields.update(extra or {})
        self.logger.log(level, message, extra=fields, exc_info=exc_info)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.log(logging.ERROR, message, extra, exc_info)


def set_logging_context(**kwargs):
    """
    Add fields to the request-scoped log context.

    Every StructuredLogger record emitted afterwards in the same context
    (one HTTP request, via the middleware in main.py) carries them.

    Example:
        set_logging_context(request_id="abc-123", path="/api/vehicle/rent")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _operation_context(func, operation_name: str, args, kwargs) -> Dict[str, Any]:
    context = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return context
    for key in _CONTEXT_ARGUMENTS:
        if key in bound.arguments:
            context[key] = str(bound.arguments[key])
    return context


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    Domain failures (client errors) are logged at WARNING, anything else at
    ERROR with a traceback. The exception is always re-raised.

    Example:
        @log_operation("rent_vehicle")
        def rent_vehicle(self, vehicle_id, customer_id):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _operation_context(func, operation_name, args, kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
            except DomainError as e:
                context["error"] = e.message
                context["reason"] = e.reason.value
                logger.warning(f"Rejected {operation_name}: {e.message}", extra=context)
                raise
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise

            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
