"""Task reconciler: merge a new generation with the carried task list.

Identity is the task id, derived from (type, target). A task regenerated
with the same type and target keeps the previous roster; its priority,
demand, metadata and cached position are refreshed from the new generation.

Usage:
    merged = reconcile(new_tasks, previous_tasks, agents)

    reconciler = TaskReconciler()
    outcome = reconciler.reconcile(new_tasks, previous_tasks, agents)
    outcome.released  # agents that lost their assignment
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from taskforce.core.agent import Agent, index_agents
from taskforce.core.suitability import SUITABILITY_WEIGHTS, Weights, weakest_member
from taskforce.core.task import Task, TaskType
from taskforce.core.types import AgentId
from taskforce.observability import get_logger
from taskforce.scheduling.models import ReconcileOutcome

logger = get_logger(__name__)


def _release(agent_id: AgentId, agents: Mapping[AgentId, Agent], outcome: ReconcileOutcome) -> None:
    agent = agents.get(agent_id)
    if agent is not None:
        agent.assignment = None
    outcome.released.append(agent_id)


def _trim_to_demand(
    task: Task,
    agents: Mapping[AgentId, Agent],
    weights: Mapping[TaskType, Weights],
    outcome: ReconcileOutcome,
) -> None:
    while len(task.roster) > task.demand:
        weakest = weakest_member(task.roster, agents, task.type, weights)
        index = len(task.roster) - 1 if weakest is None else weakest[0]
        agent_id = task.roster.pop(index)
        _release(agent_id, agents, outcome)
        logger.info("task.roster_trimmed", task=str(task.id), agent=agent_id, demand=task.demand)


def merge_tasks(
    new_tasks: Sequence[Task],
    previous_tasks: Sequence[Task],
    agents: Iterable[Agent] | Mapping[AgentId, Agent],
    weights: Mapping[TaskType, Weights] = SUITABILITY_WEIGHTS,
) -> ReconcileOutcome:
    """Merge a new generation into the previous task list.

    Neither input list nor its tasks are mutated; matched tasks are copies of
    the new task carrying the previous roster. Agents are mutated: anyone
    released has its assignment cleared.

    Args:
        new_tasks: This cycle's generated tasks, in generation order.
        previous_tasks: Last cycle's reconciled tasks.
        agents: Live agents. Roster members that are gone or no longer hold
            the task are pruned, and released agents are cleared.
        weights: Suitability weights used to pick members to trim.

    Returns:
        ReconcileOutcome with the merged list in new-generation order.
    """
    live = index_agents(agents)
    previous_by_id = {task.id: task for task in previous_tasks}
    outcome = ReconcileOutcome()

    for new_task in new_tasks:
        previous = previous_by_id.pop(new_task.id, None)
        if previous is None:
            outcome.tasks.append(replace(new_task, roster=[]))
            continue

        roster: list[AgentId] = []
        for agent_id in previous.roster:
            member = live.get(agent_id)
            if member is None or member.assignment != new_task.id:
                outcome.pruned.append(agent_id)
                continue
            roster.append(agent_id)

        merged = replace(new_task, roster=roster)
        _trim_to_demand(merged, live, weights, outcome)
        outcome.tasks.append(merged)

    for dropped in previous_by_id.values():
        outcome.dropped.append(dropped.id)
        for agent_id in dropped.roster:
            member = live.get(agent_id)
            if member is None or member.assignment != dropped.id:
                outcome.pruned.append(agent_id)
                continue
            _release(agent_id, live, outcome)
        logger.debug("task.dropped", task=str(dropped.id), roster=list(dropped.roster))

    return outcome


def reconcile(
    new_tasks: Sequence[Task],
    previous_tasks: Sequence[Task],
    agents: Iterable[Agent] | Mapping[AgentId, Agent],
) -> list[Task]:
    """Merge a new generation into the previous task list.

    See merge_tasks for details.

    Returns:
        Merged tasks in new-generation order.
    """
    return merge_tasks(new_tasks, previous_tasks, agents).tasks


class TaskReconciler:
    """Reconciler bound to a suitability weight table, with summary logging.

    Args:
        weights: Suitability weights used to pick roster members to trim.
    """

    def __init__(self, weights: Mapping[TaskType, Weights] = SUITABILITY_WEIGHTS) -> None:
        self._weights = weights

    def reconcile(
        self,
        new_tasks: Sequence[Task],
        previous_tasks: Sequence[Task],
        agents: Iterable[Agent] | Mapping[AgentId, Agent],
    ) -> ReconcileOutcome:
        outcome = merge_tasks(new_tasks, previous_tasks, agents, self._weights)
        logger.debug(
            "tasks.reconciled",
            tasks=len(outcome.tasks),
            dropped=len(outcome.dropped),
            released=len(outcome.released),
            pruned=len(outcome.pruned),
        )
        return outcome
