"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum


class ErrorReason(str, Enum):
    """
    Structured reason codes attached to domain failures.

    The reason is decided once, where the failure happens, and the API
    boundary switches on the exception type. Clients receive the code
    alongside the human-readable message.
    """

    # Input
    INVALID_INPUT = 'INVALID_INPUT'

    # Lookup
    VEHICLE_NOT_FOUND = 'VEHICLE_NOT_FOUND'
    NO_ACTIVE_RENTAL = 'NO_ACTIVE_RENTAL'

    # Rental workflow
    VEHICLE_NOT_AVAILABLE = 'VEHICLE_NOT_AVAILABLE'
    VEHICLE_NOT_RENTED = 'VEHICLE_NOT_RENTED'
    CUSTOMER_HAS_ACTIVE_RENTAL = 'CUSTOMER_HAS_ACTIVE_RENTAL'
    NOT_RENTED_BY_CUSTOMER = 'NOT_RENTED_BY_CUSTOMER'

    # Fleet administration
    DUPLICATE_LICENSE_PLATE = 'DUPLICATE_LICENSE_PLATE'

    # Storage
    CONCURRENT_MODIFICATION = 'CONCURRENT_MODIFICATION'


class ServerConfig:
    """Server configuration constants"""

    HOST = "0.0.0.0"
    PORT = 8000

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class MongoDefaults:
    """Default values for the document store connection"""

    URL = "mongodb://localhost:27017"
    DATABASE = "vehicle_rental"
    SERVER_SELECTION_TIMEOUT_MS = 5_000


class Collections:
    """Document store collection names"""

    VEHICLES = "vehicles"


class FleetRules:
    """Business limits applied to fleet vehicles"""

    LICENSE_PLATE_MIN_LENGTH = 3
    LICENSE_PLATE_MAX_LENGTH = 10
    MAX_VEHICLE_AGE_YEARS = 5


class LogConfig:
    """Logging configuration constants"""

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    FILE_NAME = "backend.log"
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
