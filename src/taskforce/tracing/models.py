"""Data models for tracing infrastructure.

Records are storage-agnostic: everything they hold is JSON-serializable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class TickRecord:
    """Complete record of a single scheduling cycle for history storage.

    Attributes:
        tick: The cycle number.
        zone: Operating zone the cycle ran for.
        timestamp: Unix timestamp when the cycle ran.
        snapshot: Reconciled task list with rosters after the cycle (JSON-serializable dict).
        events: Scheduling events (assignments, evictions, releases) in order.
        phase_timings: Optional dict of phase_name -> execution_time_ms.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = TickRecord(
            tick=42,
            zone="W1N1",
            timestamp=1704067200.0,
            snapshot={"tasks": [...]},
            events=[{"type": "assigned", "agent": "w-1", "task": "build:site-3"}],
            phase_timings={"generate": 0.4, "assign": 1.2},
        )
    """

    tick: int
    zone: str
    timestamp: float
    snapshot: dict[str, Any]
    events: list[dict[str, Any]] = field(default_factory=list)
    phase_timings: dict[str, float] | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "zone": self.zone,
            "timestamp": self.timestamp,
            "snapshot": self.snapshot,
            "events": self.events,
        }
        if self.phase_timings is not None:
            result["phase_timings"] = self.phase_timings
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TickRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            tick=data["tick"],
            zone=data["zone"],
            timestamp=data["timestamp"],
            snapshot=data["snapshot"],
            events=data.get("events", []),
            phase_timings=data.get("phase_timings"),
            metadata=data.get("metadata"),
        )
