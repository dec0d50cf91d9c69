"""Structured Logging Configuration.

This module configures structlog once at process startup.
Outputs JSON for production log aggregation, or a colored console
rendering for local development.

Configuration:
- JSON output format (LOG_FORMAT=json, default)
- Context binding support (request ids, channel ids, etc.)
- Log levels: DEBUG, INFO, WARNING, ERROR, CRITICAL
"""

import logging
import sys

import structlog

from app.config import get_log_format, get_log_level


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog processors and the stdlib root handler.

    Args:
        level: Log level name (default: LOG_LEVEL environment variable).
        fmt: "json" or "console" (default: LOG_FORMAT environment variable).
    """
    level = (level or get_log_level()).upper()
    fmt = fmt or get_log_format()
    numeric_level = logging.getLevelName(level)

    renderer: structlog.typing.Processor
    if fmt == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    # Third-party libraries (uvicorn, sqlalchemy) log through stdlib
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance for the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        structlog bound logger
    """
    return structlog.get_logger(name)
