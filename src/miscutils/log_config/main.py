"""Logging configuration and utilities."""

import logging

import structlog

from ..settings import get_settings


def get_context_logger(name: str) -> structlog.BoundLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog for applications embedding miscutils.

    The library never calls this itself; applications opt in. Arguments left
    as None fall back to the ``log_level`` and ``json_logs`` settings.

    Args:
        level: Minimum log level name (e.g. "DEBUG", "INFO")
        json_logs: Render JSON lines instead of console output

    Raises:
        ValueError: If ``level`` is not a known log level name
    """
    settings = get_settings()
    if level is None:
        level = settings.log_level
    if json_logs is None:
        json_logs = settings.json_logs

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


__all__ = [
    "get_context_logger",
    "configure_logging",
]
