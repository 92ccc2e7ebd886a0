"""Structured logging configuration for the D&D RPG character manager.

Uses structlog for key/value logging with a human-readable console
renderer in development and JSON lines in production.

Example:
    >>> from dnd_rpg.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Character leveled up", character_id=3, level=5)
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from dnd_rpg.core.config import get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from dnd_rpg.core.config import Settings


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every log entry with the application name."""
    event_dict["app"] = "dnd_rpg"
    return event_dict


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure application-wide logging.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output logs in JSON format for production.
        log_file: Optional path to a log file for persistent logging.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logging for sqlite3 and other third-party output
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=numeric_level,
        stream=sys.stdout,
        force=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logging.getLogger().addHandler(file_handler)


def setup_logging(settings: Settings | None = None) -> None:
    """Configure logging from application settings.

    Reads ``log_level``, ``json_logs`` and ``log_file`` from the
    ``DND_RPG_`` environment. Call once at process start.

    Args:
        settings: Settings to use. Defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        log_file=str(settings.log_file) if settings.log_file else None,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log entries.

    Example:
        >>> bind_context(character_id=7, operation="award_experience")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def bound_context(**kwargs: Any) -> AbstractContextManager[None]:
    """Bind context variables for the duration of a ``with`` block.

    Only the given keys are removed on exit; anything bound earlier by
    the caller is left in place.

    Example:
        >>> with bound_context(character_id=7):
        ...     logger.info("Saving")
    """
    return structlog.contextvars.bound_contextvars(**kwargs)


__all__ = [
    "configure_logging",
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "bound_context",
]
