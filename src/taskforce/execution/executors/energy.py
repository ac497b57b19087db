"""Executors that collect the resource: harvest, pickup, withdraw."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from taskforce.adapters.models import ActionCode
from taskforce.core.task import Capability, TaskResult, TaskStatus
from taskforce.execution.executors.base import BaseExecutor

if TYPE_CHECKING:
    from taskforce.adapters import Actuator
    from taskforce.core.agent import Agent
    from taskforce.core.task import Task

HARVEST_POWER = 2
"""Resource extracted per WORK unit per action."""


def _agent_full(agent: Agent) -> TaskResult | None:
    if agent.resource.is_full:
        return TaskResult.completed("Agent full")
    return None


class HarvestExecutor(BaseExecutor):
    """Extract from a renewable node.

    Agents without carry units discharge as they go and never count as full.
    A depleted node reports BLOCKED.
    """

    action_name = "harvest"
    code_statuses = MappingProxyType(
        {
            ActionCode.NOT_ENOUGH_RESOURCES: (TaskStatus.BLOCKED, "Source empty"),
            ActionCode.FULL: (TaskStatus.COMPLETED, "Agent full"),
        }
    )

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        if not agent.has(Capability.CARRY):
            return None
        return _agent_full(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.harvest(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.count(Capability.WORK) * HARVEST_POWER

    def progress_message(self) -> str:
        return "Harvesting"


class PickupExecutor(BaseExecutor):
    """Collect a loose pile. A vanished or empty pile counts as done."""

    action_name = "pickup"
    code_statuses = MappingProxyType(
        {
            ActionCode.NOT_ENOUGH_RESOURCES: (TaskStatus.COMPLETED, "Resource depleted"),
            ActionCode.INVALID_TARGET: (TaskStatus.COMPLETED, "Resource depleted"),
            ActionCode.FULL: (TaskStatus.COMPLETED, "Agent full"),
        }
    )

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        return _agent_full(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.pickup(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.resource.free

    def progress_message(self) -> str:
        return "Picking up"


class WithdrawExecutor(BaseExecutor):
    """Take resource out of a store (production reserve or container)."""

    action_name = "withdraw"
    code_statuses = MappingProxyType(
        {
            ActionCode.NOT_ENOUGH_RESOURCES: (TaskStatus.BLOCKED, "Target empty"),
            ActionCode.FULL: (TaskStatus.COMPLETED, "Agent full"),
        }
    )

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        return _agent_full(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.withdraw(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.resource.free

    def progress_message(self) -> str:
        return "Withdrawing"
