"""Configuration management for the channel registry.

This module provides centralized configuration loading from environment variables.
A .env file in the working directory is loaded on import. Required values are
cached after the first successful read.

Environment Variables:
    DATABASE_URL: Database connection URL (required for production)
    DATABASE_ECHO: Echo SQL statements when "true" (optional)
    LOG_LEVEL: Minimum log level (default: INFO)
    LOG_FORMAT: "json" for log aggregation, "console" for local development

Usage:
    from app.config import get_database_url, get_log_level

    db_url = get_database_url()  # Raises if DATABASE_URL not set
    level = get_log_level()
"""

import os
from functools import lru_cache

import structlog
from dotenv import find_dotenv, load_dotenv

# Must run before app.database reads DATABASE_URL at import time
load_dotenv(find_dotenv(usecwd=True))

log = structlog.get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "console")


def normalize_database_url(url: str) -> str:
    """Rewrite sync driver URLs to their async SQLAlchemy equivalents.

    Args:
        url: Database URL as provided by the environment.

    Returns:
        URL using postgresql+asyncpg:// or sqlite+aiosqlite://.
    """
    # Hosting providers hand out postgresql:// but we need postgresql+asyncpg://
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


@lru_cache
def get_database_url() -> str:
    """Get database URL from environment.

    Environment Variable:
        DATABASE_URL: PostgreSQL (or SQLite) connection URL

    Returns:
        Database URL with an async driver.

    Raises:
        ValueError: If DATABASE_URL not set.
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        raise ValueError("DATABASE_URL environment variable is required")
    return normalize_database_url(url)


def get_database_echo() -> bool:
    """Whether SQLAlchemy should echo SQL statements (DATABASE_ECHO=true)."""
    return os.getenv("DATABASE_ECHO", "").lower() == "true"


def get_log_level() -> str:
    """Get log level from environment.

    Environment Variable:
        LOG_LEVEL: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)

    Returns:
        Upper-case level name. Unknown values fall back to INFO.
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if level not in VALID_LOG_LEVELS:
        log.warning("invalid_log_level", value=level, using_default="INFO")
        return "INFO"
    return level


def get_log_format() -> str:
    """Get log output format ("json" or "console", default "json")."""
    fmt = os.getenv("LOG_FORMAT", "json").strip().lower()
    if fmt not in VALID_LOG_FORMATS:
        log.warning("invalid_log_format", value=fmt, using_default="json")
        return "json"
    return fmt
