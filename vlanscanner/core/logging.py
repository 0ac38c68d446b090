"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

from vlanscanner.core.config import get_settings


def configure_logging(log_level: str | None = None, log_json: bool | None = None) -> None:
    """Configure structlog with appropriate processors and output format.

    Arguments left as ``None`` fall back to the values from :func:`get_settings`.
    """
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    as_json = settings.log_json if log_json is None else log_json

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if as_json:
        # One JSON object per line for log collectors
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Scan progress narrated on the terminal
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # Use stdlib logger factory so loggers have a .name attribute
        # (required by add_logger_name processor)
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
