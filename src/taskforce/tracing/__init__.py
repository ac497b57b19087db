"""Tracing infrastructure for recording scheduling history.

This module provides protocols and data structures for capturing cycle
history, enabling debugging and reporting of scheduling decisions.

Usage:
    from taskforce.tracing import InMemoryHistoryStore, TickRecord

    store = InMemoryHistoryStore(max_ticks=500)
    colony = Colony("W1N1", actuator, history=store)

    # Or implement HistoryStore for your storage backend
    class MyHistoryStore:
        def record_tick(self, record: TickRecord) -> None:
            ...
"""

from taskforce.tracing.memory import InMemoryHistoryStore
from taskforce.tracing.models import TickRecord
from taskforce.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
