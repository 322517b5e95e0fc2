"""
Runtime Configuration

Settings are read from environment variables once per process:

- MONGODB_URL: Document store connection string
- MONGODB_DATABASE: Database name
- MONGODB_TIMEOUT_MS: Server selection timeout in milliseconds
- LOG_LEVEL: Root log level (DEBUG, INFO, ...)
- LOG_DIR: Directory for the rotating log file; console only when unset
- HOST / PORT: Bind address for `python main.py`
"""
import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from constants import MongoDefaults, ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", missing_keys=[name])


@dataclass(frozen=True)
class Settings:
    """Immutable application settings"""

    mongodb_url: str
    mongodb_database: str
    mongodb_timeout_ms: int
    log_level: str
    log_dir: Optional[Path]
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the process environment.

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        log_dir = os.environ.get("LOG_DIR")
        database = os.environ.get("MONGODB_DATABASE", MongoDefaults.DATABASE).strip()
        if not database:
            raise ConfigurationError("MONGODB_DATABASE cannot be empty", missing_keys=["MONGODB_DATABASE"])

        return cls(
            mongodb_url=os.environ.get("MONGODB_URL", MongoDefaults.URL),
            mongodb_database=database,
            mongodb_timeout_ms=_int_from_env("MONGODB_TIMEOUT_MS", MongoDefaults.SERVER_SELECTION_TIMEOUT_MS),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir).expanduser() if log_dir else None,
            host=os.environ.get("HOST", ServerConfig.HOST),
            port=_int_from_env("PORT", ServerConfig.PORT),
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read on first use."""
    settings = Settings.from_env()
    logger.debug(f"Loaded settings for database '{settings.mongodb_database}'")
    return settings
