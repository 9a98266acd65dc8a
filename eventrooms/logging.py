"""
eventrooms/logging.py

structlog configuration shared by the API process.

Production output is one JSON object per line; with ``settings.debug`` the
human-readable console renderer is used instead.  Stdlib loggers (uvicorn,
SQLAlchemy) are routed through the same level filter.
"""
from __future__ import annotations

import logging
import sys

import structlog

from eventrooms.config import settings


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger (called on app startup)."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
