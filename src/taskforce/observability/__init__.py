"""Observability: structured logging configuration."""

from taskforce.observability.logging import (
    bind_cycle_context,
    clear_cycle_context,
    get_logger,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "bind_cycle_context",
    "clear_cycle_context",
]
