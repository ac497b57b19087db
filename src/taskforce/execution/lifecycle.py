"""Lifecycle controller: run one execution step per assigned agent.

Usage:
    controller = LifecycleController(actuator)
    outcome = controller.run(tasks, agents)
    outcome.released  # agents freed for the next assignment pass
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from taskforce.core.agent import Agent, Role, index_agents
from taskforce.core.identity import TaskId
from taskforce.core.task import Task, TaskResult, TaskStatus, TaskType
from taskforce.core.types import AgentId
from taskforce.execution.models import WAIT_WHEN_BLOCKED, LifecycleOutcome
from taskforce.execution.registry import ExecutorRegistry, build_default_registry
from taskforce.observability import get_logger
from taskforce.scheduling import AssignmentEngine, AssignmentOutcome

if TYPE_CHECKING:
    from taskforce.adapters import Actuator

logger = get_logger(__name__)


class LifecycleController:
    """Dispatches assigned agents to executors and applies status transitions.

    - IN_PROGRESS: assignment kept
    - COMPLETED, FAILED: agent leaves the roster and is unassigned
    - BLOCKED: released, unless (role, task type) is in `wait_when_blocked`

    An agent whose task no longer exists is released and offered a new task
    in the same pass; it acts on that task from the next cycle. An agent
    whose task type has no executor is logged and left as is.

    Args:
        actuator: External actuation layer executors act through.
        registry: Executor dispatch table. Defaults to build_default_registry().
        engine: Assignment engine used to repair stale references.
        wait_when_blocked: Pairs that keep their assignment on BLOCKED.
    """

    def __init__(
        self,
        actuator: Actuator,
        registry: ExecutorRegistry | None = None,
        engine: AssignmentEngine | None = None,
        wait_when_blocked: frozenset[tuple[Role, TaskType]] = WAIT_WHEN_BLOCKED,
    ) -> None:
        self._actuator = actuator
        self._registry = registry or build_default_registry()
        self._engine = engine or AssignmentEngine()
        self._wait_when_blocked = wait_when_blocked

    @property
    def registry(self) -> ExecutorRegistry:
        return self._registry

    def should_wait(self, agent: Agent, task_type: TaskType) -> bool:
        """Check the blocked-wait allow-list for an agent's role."""
        return agent.role is not None and (agent.role, task_type) in self._wait_when_blocked

    def run(
        self,
        tasks: Sequence[Task],
        agents: Iterable[Agent] | Mapping[AgentId, Agent],
    ) -> LifecycleOutcome:
        """Run one execution step for every assigned, non-idle agent.

        Args:
            tasks: Reconciled tasks. Rosters are mutated.
            agents: Live agents. Assignments are mutated.

        Returns:
            LifecycleOutcome with per-agent results and releases.
        """
        live = index_agents(agents)
        by_id = {task.id: task for task in tasks}
        outcome = LifecycleOutcome()

        for agent in list(live.values()):
            task_id = agent.assignment
            if task_id is None or agent.is_idle:
                continue
            task = by_id.get(task_id)

            if task is None:
                self._repair_stale(agent, task_id, tasks, live, outcome)
                continue

            executor = self._registry.get(task.type)
            if executor is None:
                logger.error(
                    "executor.missing", agent=agent.id, task=str(task.id), type=task.type.value
                )
                outcome.missing_executor[agent.id] = task.id
                continue

            result = executor.execute(agent, task, self._actuator)
            outcome.results[agent.id] = result
            self._apply(agent, task, result, outcome)

        return outcome

    def _apply(
        self, agent: Agent, task: Task, result: TaskResult, outcome: LifecycleOutcome
    ) -> None:
        if result.status is TaskStatus.IN_PROGRESS:
            return
        if result.status is TaskStatus.BLOCKED and self.should_wait(agent, task.type):
            outcome.waiting.append(agent.id)
            logger.debug("task.waiting", agent=agent.id, task=str(task.id), reason=result.message)
            return
        task.release(agent.id)
        agent.assignment = None
        outcome.released.append(agent.id)
        logger.info(
            "task.released",
            agent=agent.id,
            task=str(task.id),
            status=result.status.value,
            reason=result.message,
        )

    def _repair_stale(
        self,
        agent: Agent,
        stale_id: TaskId,
        tasks: Sequence[Task],
        live: Mapping[AgentId, Agent],
        outcome: LifecycleOutcome,
    ) -> None:
        for task in tasks:
            task.release(agent.id)
        agent.assignment = None
        outcome.stale[agent.id] = stale_id
        logger.info("task.stale_reference", agent=agent.id, task=str(stale_id))

        reassigned = self._engine.assign_one(agent, tasks, live)
        if outcome.reassignment is None:
            outcome.reassignment = AssignmentOutcome()
        outcome.reassignment.merge(reassigned)
