"""Structured logging for fixture state changes."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def add_timestamp(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add ISO format timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def configure_logging(
    level: str = "info",
    format_type: str = "json",
    stream: Any = None,
) -> None:
    """
    Configure structured logging for the library.

    Args:
        level: Log level (debug, info, warn, error)
        format_type: Output format ('json' or 'text')
        stream: Output stream (default: sys.stderr)
    """
    if stream is None:
        stream = sys.stderr

    log_level = LEVELS.get(level.lower(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=log_level,
    )

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        add_timestamp,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if format_type == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Loggers are resolved lazily on every call so a later reconfiguration
    # (e.g. from HouseConfig) reaches module-level loggers too.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog logger
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


# Initialize with defaults on import
configure_logging()
