"""Execution models: the executor protocol, blocked-wait table, and pass outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from taskforce.core.agent import Role
from taskforce.core.identity import TaskId
from taskforce.core.task import TaskResult, TaskType
from taskforce.core.types import AgentId

if TYPE_CHECKING:
    from taskforce.adapters import Actuator
    from taskforce.core.agent import Agent
    from taskforce.core.task import Task
    from taskforce.scheduling import AssignmentOutcome


@runtime_checkable
class Executor(Protocol):
    """Protocol for per-task-type execution handlers.

    An executor performs at most one world-affecting action per call (a
    movement request or the task's terminal action) and reports the status
    transition to apply.

    Built-in implementations (taskforce.execution.executors):
    - HarvestExecutor, PickupExecutor, WithdrawExecutor
    - TransferExecutor
    - BuildExecutor, RepairExecutor, UpgradeExecutor
    - DefendExecutor
    """

    def execute(self, agent: Agent, task: Task, actuator: Actuator) -> TaskResult:
        """Run one execution step.

        Args:
            agent: Assigned agent.
            task: Task the agent holds.
            actuator: External actuation layer.

        Returns:
            TaskResult with the status transition and a diagnostic message.
        """
        ...


WAIT_WHEN_BLOCKED: frozenset[tuple[Role, TaskType]] = frozenset(
    {
        # Extraction-only agents wait at a depleted node until it renews
        (Role.HARVESTER, TaskType.HARVEST_ENERGY),
    }
)
"""(role, task type) pairs that keep their assignment on a BLOCKED result."""


@dataclass
class LifecycleOutcome:
    """Result of one lifecycle pass over assigned agents."""

    results: dict[AgentId, TaskResult] = field(default_factory=dict)
    """Agent id -> result of its execution step this cycle."""

    released: list[AgentId] = field(default_factory=list)
    """Agents removed from their task (completed, failed, or blocked without waiting)."""

    waiting: list[AgentId] = field(default_factory=list)
    """Agents that stayed assigned through a BLOCKED result."""

    stale: dict[AgentId, TaskId] = field(default_factory=dict)
    """Agents whose task no longer exists -> the missing task id."""

    missing_executor: dict[AgentId, TaskId] = field(default_factory=dict)
    """Agents skipped because no executor handles their task type."""

    reassignment: AssignmentOutcome | None = None
    """Assignments made while repairing stale references, if any."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "results": {agent_id: res.to_dict() for agent_id, res in self.results.items()},
            "released": list(self.released),
            "waiting": list(self.waiting),
            "stale": {agent_id: str(task_id) for agent_id, task_id in self.stale.items()},
            "missing_executor": {
                agent_id: str(task_id) for agent_id, task_id in self.missing_executor.items()
            },
        }
        if self.reassignment is not None:
            result["reassignment"] = self.reassignment.to_dict()
        return result
