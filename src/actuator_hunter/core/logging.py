"""Structured logging configuration for Actuator Hunter.

Uses structlog on top of the standard library so discovery lines can be
rendered for a console or as JSON for log aggregation.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

_HANDLER_MARK = "_actuator_hunter_handler"


def get_utc_timestamp() -> str:
    """Get current UTC timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat()


def add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add UTC timestamp to log events."""
    event_dict["timestamp"] = get_utc_timestamp()
    return event_dict


def add_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add default context fields to log events."""
    event_dict.setdefault("service", "actuator-hunter")
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> Any:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON logs for machine parsing
        log_file: Optional file path for logging

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper())

    processors = [
        structlog.stdlib.filter_by_level,
        add_timestamp,
        add_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Reconfiguring replaces our handlers instead of stacking duplicates
    for existing in list(root_logger.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root_logger.removeHandler(existing)
            existing.close()

    # Log to stderr so stdout stays free for report output
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    return structlog.get_logger("actuator_hunter")


def get_logger(name: str = "actuator_hunter") -> Any:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)
