"""Task models: kinds, capabilities, tasks and execution results.

Usage:
    task = Task(
        type=TaskType.HARVEST_ENERGY,
        target="source-1",
        priority=80,
        demand=2,
        required_capabilities=frozenset({Capability.WORK}),
    )
    task.id  # TaskId(HARVEST_ENERGY, "source-1")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from taskforce.core.identity import TaskId
from taskforce.core.types import AgentId

ACCEPT_ALL_DEMAND = 99
"""Demand sentinel meaning "accept as many suitable agents as are present"."""


class TaskType(StrEnum):
    """Closed set of task kinds."""

    # Energy acquisition
    HARVEST_ENERGY = auto()
    PICKUP_ENERGY = auto()
    HAUL_ENERGY = auto()
    WITHDRAW_ENERGY = auto()

    # Logistics
    REFILL_SPAWN = auto()
    REFILL_EXTENSION = auto()
    REFILL_TOWER = auto()

    # Construction & repair
    BUILD = auto()
    REPAIR = auto()

    # Objective
    UPGRADE_CONTROLLER = auto()

    # Defense
    DEFEND_ROOM = auto()

    # Placeholder for agents with nothing to do
    IDLE = auto()


class ResourceFlow(StrEnum):
    """How a task type moves the single fungible resource."""

    ACQUIRE = auto()  # Agent needs free capacity
    CONSUME = auto()  # Agent needs to hold some resource
    NEUTRAL = auto()  # No resource requirement


RESOURCE_FLOWS: dict[TaskType, ResourceFlow] = {
    TaskType.HARVEST_ENERGY: ResourceFlow.ACQUIRE,
    TaskType.PICKUP_ENERGY: ResourceFlow.ACQUIRE,
    TaskType.HAUL_ENERGY: ResourceFlow.ACQUIRE,
    TaskType.WITHDRAW_ENERGY: ResourceFlow.ACQUIRE,
    TaskType.REFILL_SPAWN: ResourceFlow.CONSUME,
    TaskType.REFILL_EXTENSION: ResourceFlow.CONSUME,
    TaskType.REFILL_TOWER: ResourceFlow.CONSUME,
    TaskType.BUILD: ResourceFlow.CONSUME,
    TaskType.REPAIR: ResourceFlow.CONSUME,
    TaskType.UPGRADE_CONTROLLER: ResourceFlow.CONSUME,
    TaskType.DEFEND_ROOM: ResourceFlow.NEUTRAL,
    TaskType.IDLE: ResourceFlow.NEUTRAL,
}


def resource_flow(task_type: TaskType) -> ResourceFlow:
    """Get the resource flow of a task type (NEUTRAL if unclassified)."""
    return RESOURCE_FLOWS.get(task_type, ResourceFlow.NEUTRAL)


class Capability(StrEnum):
    """Capability tags an agent holds units of."""

    WORK = auto()
    CARRY = auto()
    FIGHT = auto()
    MOVE = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Grid position inside a named operating zone."""

    x: int
    y: int
    zone: str = ""

    def range_to(self, other: Position) -> float:
        """Chebyshev distance to another position.

        Returns:
            Number of grid steps, or infinity when the zones differ.
        """
        if self.zone != other.zone:
            return float("inf")
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def in_range_to(self, other: Position, distance: int) -> bool:
        """Check if other lies within distance steps."""
        return self.range_to(other) <= distance


@dataclass
class Task:
    """A unit of prioritized demand with a stable identity, a capacity, and a roster.

    Attributes:
        type: Kind of work.
        target: Reference to the world object the task acts on.
        priority: Higher executes first.
        demand: Desired agent count (ACCEPT_ALL_DEMAND for "as many as present").
        target_position: Cached position of the target; the target may become unobservable.
        roster: Assigned agent ids, in insertion order.
        required_capabilities: Tags an agent needs at least one unit of each.
        metadata: Task-kind-specific parameters.
    """

    type: TaskType
    target: str
    priority: int = 0
    demand: int = 1
    target_position: Position | None = None
    roster: list[AgentId] = field(default_factory=list)
    required_capabilities: frozenset[Capability] = frozenset()
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.demand < 0:
            raise ValueError(f"Task demand must be non-negative, got {self.demand}")
        if self.type is TaskType.IDLE:
            raise ValueError("The idle sentinel is not a schedulable task")

    @property
    def id(self) -> TaskId:
        return TaskId(type=self.type, target=self.target)

    @property
    def is_full(self) -> bool:
        """True when the roster has reached demand."""
        return len(self.roster) >= self.demand

    @property
    def open_slots(self) -> int:
        return max(0, self.demand - len(self.roster))

    def release(self, agent_id: AgentId) -> bool:
        """Remove an agent from the roster. Returns True if it was present."""
        if agent_id in self.roster:
            self.roster.remove(agent_id)
            return True
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "id": str(self.id),
            "type": self.type.value,
            "target": self.target,
            "priority": self.priority,
            "demand": self.demand,
            "target_position": (
                None
                if self.target_position is None
                else {
                    "x": self.target_position.x,
                    "y": self.target_position.y,
                    "zone": self.target_position.zone,
                }
            ),
            "roster": list(self.roster),
            "required_capabilities": sorted(c.value for c in self.required_capabilities),
            "metadata": dict(self.metadata),
        }


IDLE_TASK_ID = TaskId(type=TaskType.IDLE, target="idle")
"""Reserved id of the idle sentinel. Never present in a task list."""


class TaskStatus(StrEnum):
    """Outcome of one execution step.

    - IN_PROGRESS: Keep the assignment, run again next cycle
    - COMPLETED: Work done, release the agent
    - FAILED: Action rejected by the environment, release the agent
    - BLOCKED: Cannot proceed right now (release unless waiting is allowed)
    """

    IN_PROGRESS = auto()
    COMPLETED = auto()
    FAILED = auto()
    BLOCKED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.COMPLETED, TaskStatus.FAILED)


@dataclass(frozen=True, slots=True)
class TaskResult:
    """Result of a single execution step.

    Attributes:
        status: Status transition to apply.
        message: Diagnostic text (never acted on).
        work_done: Amount of work performed this step (energy moved, progress added).
    """

    status: TaskStatus
    message: str | None = None
    work_done: int = 0

    @classmethod
    def in_progress(cls, message: str | None = None, work_done: int = 0) -> TaskResult:
        return cls(TaskStatus.IN_PROGRESS, message, work_done)

    @classmethod
    def completed(cls, message: str | None = None) -> TaskResult:
        return cls(TaskStatus.COMPLETED, message)

    @classmethod
    def failed(cls, message: str | None = None) -> TaskResult:
        return cls(TaskStatus.FAILED, message)

    @classmethod
    def blocked(cls, message: str | None = None) -> TaskResult:
        return cls(TaskStatus.BLOCKED, message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"status": self.status.value, "message": self.message, "work_done": self.work_done}
