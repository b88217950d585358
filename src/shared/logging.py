"""Structured logging for the MCP tool client.

Uses structlog. Log lines go to stderr so that an agent runtime which
owns stdout for its transcript is never interleaved with client chatter.
"""

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Argument payloads can be large and may hold user data.
_ELIDED_KEYS = ("arguments", "result")
_MAX_VALUE_LENGTH = 200


def truncate_payloads(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Shorten tool arguments and results before they are rendered."""
    for key in _ELIDED_KEYS:
        value = event_dict.get(key)
        if value is None:
            continue
        text = value if isinstance(value, str) else repr(value)
        if len(text) > _MAX_VALUE_LENGTH:
            event_dict[key] = text[:_MAX_VALUE_LENGTH] + "..."
    return event_dict


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON; otherwise, use colored console output
    """
    level = getattr(logging, log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        truncate_payloads,
    ]

    if json_output:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # httpx logs every request at INFO through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically module name)
        **initial_context: Initial context values to bind to logger

    Returns:
        A bound structlog logger instance
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


def log_context(**context: Any) -> AbstractContextManager[Any]:
    """
    Bind context values to every log line emitted inside the block.

    Values previously bound under the same keys are restored on exit.
    """
    return structlog.contextvars.bound_contextvars(**context)
