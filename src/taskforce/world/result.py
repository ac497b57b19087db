"""Cycle results: everything one scheduling cycle decided, for external consumers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from taskforce.core.task import Task
from taskforce.execution import LifecycleOutcome
from taskforce.scheduling import AssignmentOutcome, ReconcileOutcome


def _assignment_events(outcome: AssignmentOutcome) -> list[dict[str, Any]]:
    events: list[dict[str, Any]] = []
    for eviction in outcome.evictions:
        events.append(
            {
                "type": "evicted",
                "agent": eviction.evicted,
                "task": str(eviction.task),
                "replaced_by": eviction.replaced_by,
            }
        )
    for agent_id, task_id in outcome.assigned.items():
        events.append({"type": "assigned", "agent": agent_id, "task": str(task_id)})
    for agent_id in outcome.idled:
        events.append({"type": "idle", "agent": agent_id})
    return events


@dataclass
class CycleReport:
    """Outcome of one Colony.run_cycle call.

    Attributes:
        tick: Cycle number from the snapshot.
        zone: Operating zone.
        tasks: Reconciled task list with rosters, carried into the next cycle.
        reconcile: Merge outcome (dropped tasks, released agents).
        assignment: Assignment pass outcome.
        lifecycle: Execution pass outcome.
        phase_timings: Phase name -> wall time in milliseconds.
    """

    tick: int
    zone: str
    tasks: list[Task]
    reconcile: ReconcileOutcome
    assignment: AssignmentOutcome
    lifecycle: LifecycleOutcome
    phase_timings: dict[str, float] = field(default_factory=dict)

    def task_snapshot(self) -> dict[str, Any]:
        """Reconciled task list as a JSON-serializable dictionary."""
        return {"tasks": [task.to_dict() for task in self.tasks]}

    def events(self) -> list[dict[str, Any]]:
        """Flatten the cycle's scheduling decisions into ordered events."""
        events: list[dict[str, Any]] = []
        for task_id in self.reconcile.dropped:
            events.append({"type": "dropped", "task": str(task_id)})
        for agent_id in self.reconcile.released:
            events.append({"type": "released", "agent": agent_id, "reason": "reconcile"})
        events.extend(_assignment_events(self.assignment))
        for agent_id, task_id in self.lifecycle.stale.items():
            events.append({"type": "stale", "agent": agent_id, "task": str(task_id)})
        if self.lifecycle.reassignment is not None:
            events.extend(_assignment_events(self.lifecycle.reassignment))
        for agent_id, task_id in self.lifecycle.missing_executor.items():
            events.append({"type": "missing_executor", "agent": agent_id, "task": str(task_id)})
        for agent_id in self.lifecycle.released:
            result = self.lifecycle.results[agent_id]
            events.append(
                {
                    "type": "released",
                    "agent": agent_id,
                    "reason": result.status.value,
                    "message": result.message,
                }
            )
        return events

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "tick": self.tick,
            "zone": self.zone,
            **self.task_snapshot(),
            "reconcile": self.reconcile.to_dict(),
            "assignment": self.assignment.to_dict(),
            "lifecycle": self.lifecycle.to_dict(),
            "phase_timings": dict(self.phase_timings),
        }
