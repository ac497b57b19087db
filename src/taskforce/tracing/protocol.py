"""Protocols for tracing infrastructure.

These protocols define the interface for history storage backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from taskforce.tracing.models import TickRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving cycle history.

    Implementations store TickRecords and provide random access to past
    cycles for debugging and reporting.

    Usage:
        store = InMemoryHistoryStore(max_ticks=1000)
        colony = Colony("W1N1", actuator, history=store)

        colony.run_cycle(snapshot, agents)
        store.get_snapshot(tick=snapshot.tick)
    """

    def record_tick(self, record: TickRecord) -> None:
        """Record a cycle.

        Args:
            record: Complete record of the cycle to store.

        Note:
            Implementations may have bounded storage (e.g., last N ticks).
            Older records may be evicted when the limit is reached.
        """
        ...

    def get_tick(self, tick: int) -> TickRecord | None:
        """Get complete tick record, or None if not in storage."""
        ...

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        """Get the task snapshot at a specific tick, or None if not in storage."""
        ...

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        """Get events in tick range (inclusive).

        Args:
            start_tick: First tick to include.
            end_tick: Last tick to include.

        Returns:
            Flattened list of all events in the range.
        """
        ...

    def get_tick_range(self) -> tuple[int, int] | None:
        """Get available tick range as (min_tick, max_tick), None if empty."""
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def tick_count(self) -> int:
        """Number of ticks currently stored."""
        ...
