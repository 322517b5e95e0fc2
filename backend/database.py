import logging
from typing import Iterator, Optional

from pymongo import MongoClient
from pymongo.database import Database

from config.settings import get_settings
from repositories.vehicle_repository import ensure_vehicle_indexes

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None


def get_client() -> MongoClient:
    """Process-wide MongoClient; pymongo pools connections internally."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_url,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
        logger.info(f"MongoDB client created for database '{settings.mongodb_database}'")
    return _client


def get_database() -> Database:
    return get_client()[get_settings().mongodb_database]


def init_database() -> None:
    """Create collections' indexes. Called once at startup."""
    ensure_vehicle_indexes(get_database())


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")


def get_db() -> Iterator[Database]:
    """Dependency for FastAPI routes"""
    yield get_database()
