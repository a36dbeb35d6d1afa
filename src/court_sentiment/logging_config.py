"""
Structured logging configuration using structlog.

This module sets up structlog for JSON-based structured logging with context binding.
Logs go to stderr so CLI output on stdout stays machine-readable.
"""

import logging
import sys

import structlog

from .config import settings


def setup_logging(log_level: str | None = None, log_json: bool | None = None) -> None:
    """
    Configure structlog for structured logging.

    Sets up processors for:
    - Context variable merging
    - Log level addition
    - Timestamp addition
    - JSON or console rendering based on settings

    Args:
        log_level: Override for settings.log_level
        log_json: Override for settings.log_json
    """
    level = log_level or settings.log_level
    as_json = settings.log_json if log_json is None else log_json

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if as_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
