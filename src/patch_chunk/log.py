"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from patch_chunk.domain.models import LoggingConfig

if TYPE_CHECKING:
    from structlog.types import Processor

__all__ = ["configure_logging", "get_logger"]


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Route structlog output to stdout at the configured level and format."""
    if config is None:
        config = LoggingConfig()
    level = getattr(logging, config.level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.format == "json":
        processors: list[Processor] = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Module-level loggers are created at import time, before configuration.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> Any:
    """Return a bound structlog logger, optionally pre-bound with ``initial_context``."""
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
