"""Scheduling models: per-pass outcomes of the reconciler and assignment engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from taskforce.core.identity import TaskId
from taskforce.core.types import AgentId

if TYPE_CHECKING:
    from taskforce.core.task import Task


@dataclass
class ReconcileOutcome:
    """Result of merging a new generation into the carried task list.

    Attributes:
        tasks: Merged tasks in generation order, rosters carried over.
        released: Agents whose assignment was cleared (dropped task or roster trim).
        dropped: Ids of previous tasks absent from the new generation.
        pruned: Roster members removed because they are gone or no longer hold the task.
    """

    tasks: list[Task] = field(default_factory=list)
    released: list[AgentId] = field(default_factory=list)
    dropped: list[TaskId] = field(default_factory=list)
    pruned: list[AgentId] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary (task rosters excluded)."""
        return {
            "task_count": len(self.tasks),
            "released": list(self.released),
            "dropped": [str(task_id) for task_id in self.dropped],
            "pruned": list(self.pruned),
        }


@dataclass(frozen=True, slots=True)
class Eviction:
    """One displacement swap: `evicted` left `task` so `replaced_by` could join."""

    task: TaskId
    evicted: AgentId
    replaced_by: AgentId


@dataclass
class AssignmentOutcome:
    """Result of one assignment pass.

    Attributes:
        assigned: Agent id -> task id it joined this pass.
        evictions: Displacement swaps, in the order they happened.
        idled: Agents parked on the idle sentinel.
    """

    assigned: dict[AgentId, TaskId] = field(default_factory=dict)
    evictions: list[Eviction] = field(default_factory=list)
    idled: list[AgentId] = field(default_factory=list)

    @property
    def evicted(self) -> list[AgentId]:
        return [eviction.evicted for eviction in self.evictions]

    def merge(self, other: AssignmentOutcome) -> None:
        """Merge other outcome into this one, mutating self in place."""
        self.assigned.update(other.assigned)
        self.evictions.extend(other.evictions)
        self.idled.extend(other.idled)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "assigned": {agent_id: str(task_id) for agent_id, task_id in self.assigned.items()},
            "evictions": [
                {
                    "task": str(eviction.task),
                    "evicted": eviction.evicted,
                    "replaced_by": eviction.replaced_by,
                }
                for eviction in self.evictions
            ],
            "idled": list(self.idled),
        }
