"""Structured logging setup."""

import logging

import structlog

from gatekeeper.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog for the process.

    Call once at the outermost boundary (CLI entry point or host
    application startup). Library modules only ever call
    ``structlog.get_logger()``.

    Args:
        settings: Settings providing log level and environment
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if settings.is_production
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
