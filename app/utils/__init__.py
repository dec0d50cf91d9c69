"""Cross-cutting utilities for the channel registry.

Modules:
    logging: structlog configuration shared by the API and scripts.
"""

from app.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
