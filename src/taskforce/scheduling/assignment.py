"""Assignment engine: give every idle agent its best eligible task.

Usage:
    engine = AssignmentEngine()
    outcome = engine.assign(tasks, agents)
    outcome.assigned   # agent id -> task id
    outcome.evictions  # displacement swaps
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from taskforce.core.agent import Agent, Role, index_agents
from taskforce.core.eligibility import ROLE_TASK_FILTERS, evaluate
from taskforce.core.identity import TaskId
from taskforce.core.suitability import SUITABILITY_WEIGHTS, Weights
from taskforce.core.task import IDLE_TASK_ID, Task, TaskType
from taskforce.core.types import AgentId
from taskforce.observability import get_logger
from taskforce.scheduling.models import AssignmentOutcome, Eviction

logger = get_logger(__name__)


def rank_tasks(tasks: Sequence[Task]) -> list[Task]:
    """Order tasks by (priority desc, generation order asc)."""
    ranked = sorted(enumerate(tasks), key=lambda pair: (-pair[1].priority, pair[0]))
    return [task for _, task in ranked]


class AssignmentEngine:
    """Selects tasks for unassigned agents, applying eligibility and displacement.

    Candidates are processed in input order. An agent evicted during a pass
    is not offered another task until the next pass.

    Args:
        filters: Role filter table (role -> permitted task types).
        weights: Suitability weight table, used for displacement comparisons.
    """

    def __init__(
        self,
        filters: Mapping[Role, frozenset[TaskType]] = ROLE_TASK_FILTERS,
        weights: Mapping[TaskType, Weights] = SUITABILITY_WEIGHTS,
    ) -> None:
        self._filters = filters
        self._weights = weights

    def assign(
        self,
        tasks: Sequence[Task],
        agents: Iterable[Agent] | Mapping[AgentId, Agent],
    ) -> AssignmentOutcome:
        """Run one assignment pass over all idle agents.

        Args:
            tasks: Reconciled tasks in generation order. Rosters are mutated.
            agents: Live agents. Assignments are mutated.

        Returns:
            AssignmentOutcome describing joins, evictions and idled agents.
        """
        live = index_agents(agents)
        ranked = rank_tasks(tasks)
        candidates = [agent for agent in live.values() if agent.is_idle]
        outcome = AssignmentOutcome()
        for agent in candidates:
            self._assign_agent(agent, ranked, live, outcome)
        logger.debug(
            "assignment.pass",
            candidates=len(candidates),
            assigned=len(outcome.assigned),
            evicted=len(outcome.evictions),
            idled=len(outcome.idled),
        )
        return outcome

    def assign_one(
        self,
        agent: Agent,
        tasks: Sequence[Task],
        agents: Iterable[Agent] | Mapping[AgentId, Agent],
    ) -> AssignmentOutcome:
        """Assign a single agent, used to repair stale references mid-cycle.

        Args:
            agent: Agent to place. Must be unassigned or idle.
            tasks: Reconciled tasks in generation order.
            agents: Live agents, used to score roster members.

        Returns:
            AssignmentOutcome for this agent alone.
        """
        outcome = AssignmentOutcome()
        if agent.is_idle:
            self._assign_agent(agent, rank_tasks(tasks), index_agents(agents), outcome)
        return outcome

    def _assign_agent(
        self,
        agent: Agent,
        ranked: Sequence[Task],
        live: Mapping[AgentId, Agent],
        outcome: AssignmentOutcome,
    ) -> TaskId:
        for task in ranked:
            verdict = evaluate(agent, task, live, filters=self._filters, weights=self._weights)
            if not verdict.eligible:
                continue
            if verdict.evict is not None:
                self._evict(task, verdict.evict, agent.id, live, outcome)
            task.roster.append(agent.id)
            agent.assignment = task.id
            outcome.assigned[agent.id] = task.id
            logger.info("task.assigned", agent=agent.id, task=str(task.id), priority=task.priority)
            return task.id

        agent.assignment = IDLE_TASK_ID
        outcome.idled.append(agent.id)
        logger.debug("agent.idle", agent=agent.id)
        return IDLE_TASK_ID

    def _evict(
        self,
        task: Task,
        evicted_id: AgentId,
        replaced_by: AgentId,
        live: Mapping[AgentId, Agent],
        outcome: AssignmentOutcome,
    ) -> None:
        task.release(evicted_id)
        evicted = live.get(evicted_id)
        if evicted is not None:
            evicted.assignment = None
        outcome.assigned.pop(evicted_id, None)
        outcome.evictions.append(
            Eviction(task=task.id, evicted=evicted_id, replaced_by=replaced_by)
        )
        logger.info("task.evicted", task=str(task.id), evicted=evicted_id, replaced_by=replaced_by)
