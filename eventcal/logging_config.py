"""Structured logging configuration using structlog.

Log lines go to stderr so command output on stdout stays clean.
Loggers are not cached, so module-level loggers follow the most recent
``setup_logging`` call.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from eventcal.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure structured logging for the CLI process.

    ``level`` overrides EVENTCAL_LOG_LEVEL when given.
    """
    settings = get_settings()
    level_name = (level or settings.eventcal_log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if settings.eventcal_env == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a named structured logger."""
    return structlog.get_logger(name)
