"""Structured logging setup.

Usage:
    from taskforce.observability import setup_logging, get_logger

    setup_logging(LoggingSettings(level="DEBUG", format="console"))
    logger = get_logger(__name__)
    logger.info("task.assigned", agent="worker-1", task="build:site-3")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from taskforce.config import LoggingSettings


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure stdlib logging and structlog processors.

    Args:
        settings: Logging settings. Defaults to LoggingSettings() (environment).
    """
    settings = settings or LoggingSettings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.level.upper(), logging.INFO),
        force=True,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=settings.service_name)


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)


def bind_cycle_context(zone: str, tick: int) -> None:
    """Bind zone and tick to every log entry emitted during a cycle."""
    structlog.contextvars.bind_contextvars(zone=zone, tick=tick)


def clear_cycle_context() -> None:
    structlog.contextvars.unbind_contextvars("zone", "tick")
