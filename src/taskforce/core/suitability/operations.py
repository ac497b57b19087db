"""Suitability scoring operations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from taskforce.core.agent.models import Agent
from taskforce.core.suitability.models import SUITABILITY_WEIGHTS, Weights
from taskforce.core.task.models import TaskType
from taskforce.core.types import AgentId


def score(
    agent: Agent,
    task_type: TaskType,
    weights: Mapping[TaskType, Weights] = SUITABILITY_WEIGHTS,
) -> int:
    """Score how well an agent's capabilities fit a task type.

    Args:
        agent: Agent to score.
        task_type: Task type being considered.
        weights: Weight table (defaults to SUITABILITY_WEIGHTS).

    Returns:
        Weighted sum of capability counts, or the plain sum of all counts
        when the task type has no weights.
    """
    table = weights.get(task_type)
    if table is None:
        return sum(agent.capabilities.values())
    return sum(weight * agent.count(capability) for capability, weight in table.items())


def weakest_member(
    roster: Sequence[AgentId],
    agents: Mapping[AgentId, Agent],
    task_type: TaskType,
    weights: Mapping[TaskType, Weights] = SUITABILITY_WEIGHTS,
) -> tuple[int, AgentId, int] | None:
    """Find the lowest-scoring roster member.

    Ties go to the earliest member in roster order. Members missing from
    `agents` are skipped.

    Args:
        roster: Assigned agent ids in insertion order.
        agents: Live agents by id.
        task_type: Task type to score against.
        weights: Weight table.

    Returns:
        (roster_index, agent_id, score) of the weakest member, or None if no
        member could be scored.
    """
    weakest: tuple[int, AgentId, int] | None = None
    for index, agent_id in enumerate(roster):
        member = agents.get(agent_id)
        if member is None:
            continue
        member_score = score(member, task_type, weights)
        if weakest is None or member_score < weakest[2]:
            weakest = (index, agent_id, member_score)
    return weakest
