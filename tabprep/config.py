"""
Configuration Management

Settings are read from environment variables prefixed with ``TABPREP_``
(and an optional ``.env`` file) with Pydantic validation.
"""

import logging
import os
from functools import lru_cache
from logging import Handler
from logging.handlers import RotatingFileHandler
from typing import Optional

import numpy as np
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "tabprep"


class Settings(BaseSettings):
    """Library settings with automatic environment variable loading."""

    model_config = SettingsConfigDict(
        env_prefix="TABPREP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Floating dtype every input matrix is coerced to
    DTYPE: str = "float64"

    # === LOGGING ===
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    @field_validator("DTYPE")
    @classmethod
    def validate_dtype(cls, v: str) -> str:
        try:
            dtype = np.dtype(v)
        except TypeError as exc:
            raise ValueError(f"Unknown dtype: {v}") from exc
        if dtype.kind != "f":
            raise ValueError(f"DTYPE must be a floating point dtype, got {v}")
        return dtype.name

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.

    The library itself only installs a NullHandler; applications that want
    tabprep's messages call this once at startup.

    Args:
        settings: Settings to use. Defaults to ``get_settings()``.

    Returns:
        The configured ``tabprep`` logger.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Remove handlers from a previous call to prevent duplicates
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler: Handler = RotatingFileHandler(
            settings.LOG_FILE,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)8s] %(name)s: %(message)s "
                "[%(filename)s:%(lineno)d in %(funcName)s()]"
            )
        )
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(console_handler)

    logger.debug(f"Logging initialized. Level: {settings.LOG_LEVEL}, file: {settings.LOG_FILE}")
    return logger
