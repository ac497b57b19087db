"""Eligibility filter operations.

The chain runs role, capability, resource state, then capacity/displacement,
and stops at the first failing filter.
"""

from __future__ import annotations

from collections.abc import Mapping

from taskforce.core.agent.models import Agent, Role
from taskforce.core.eligibility.models import ELIGIBLE, ROLE_TASK_FILTERS, Rejection, Verdict
from taskforce.core.suitability.models import SUITABILITY_WEIGHTS, Weights
from taskforce.core.suitability.operations import score, weakest_member
from taskforce.core.task.models import Capability, ResourceFlow, Task, TaskType, resource_flow
from taskforce.core.types import AgentId


def role_permits(
    agent: Agent,
    task_type: TaskType,
    filters: Mapping[Role, frozenset[TaskType]] = ROLE_TASK_FILTERS,
) -> bool:
    """Check the hard role filter. Agents without a listed role are unrestricted."""
    if agent.role is None:
        return True
    allowed = filters.get(agent.role)
    return allowed is None or task_type in allowed


def has_capabilities(agent: Agent, required: frozenset[Capability]) -> bool:
    """Check the agent holds at least one unit of every required capability."""
    return all(agent.has(capability) for capability in required)


def resource_permits(agent: Agent, task_type: TaskType) -> bool:
    """Check the agent's resource state suits the task's resource flow.

    Consuming tasks need a held resource. Acquiring tasks need free capacity,
    except for agents with no carry units, which discharge immediately.
    """
    flow = resource_flow(task_type)
    if flow is ResourceFlow.CONSUME:
        return not agent.resource.is_empty
    if flow is ResourceFlow.ACQUIRE:
        if not agent.has(Capability.CARRY):
            return True
        return agent.resource.free > 0
    return True


def evaluate(
    agent: Agent,
    task: Task,
    agents: Mapping[AgentId, Agent],
    *,
    filters: Mapping[Role, frozenset[TaskType]] = ROLE_TASK_FILTERS,
    weights: Mapping[TaskType, Weights] = SUITABILITY_WEIGHTS,
) -> Verdict:
    """Run the full eligibility chain for one agent against one task.

    Args:
        agent: Candidate agent.
        task: Task under consideration.
        agents: Live agents by id (used to score current roster members).
        filters: Role filter table.
        weights: Suitability weight table.

    Returns:
        Verdict carrying the first rejection, or the member to evict when
        the task is full and the candidate outranks its weakest member.
    """
    if not role_permits(agent, task.type, filters):
        return Verdict(rejection=Rejection.ROLE)
    if not has_capabilities(agent, task.required_capabilities):
        return Verdict(rejection=Rejection.CAPABILITY)
    if not resource_permits(agent, task.type):
        return Verdict(rejection=Rejection.RESOURCE)
    if agent.id in task.roster:
        return Verdict(rejection=Rejection.CAPACITY)
    if not task.is_full:
        return ELIGIBLE

    weakest = weakest_member(task.roster, agents, task.type, weights)
    if weakest is None:
        return Verdict(rejection=Rejection.CAPACITY)
    _, weakest_id, weakest_score = weakest
    if score(agent, task.type, weights) > weakest_score:
        return Verdict(evict=weakest_id)
    return Verdict(rejection=Rejection.CAPACITY)
