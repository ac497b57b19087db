"""Executors that spend the carried resource: transfer, build, repair, upgrade."""

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

BUILD_POWER = 5
REPAIR_POWER = 100
UPGRADE_POWER = 1

_OUT_OF_ENERGY = (TaskStatus.COMPLETED, "No energy")


def _agent_empty(agent: Agent) -> TaskResult | None:
    if agent.resource.is_empty:
        return TaskResult.completed("No energy")
    return None


class TransferExecutor(BaseExecutor):
    """Deliver carried resource into a store. Done when empty or the target is full."""

    action_name = "transfer"
    code_statuses = MappingProxyType(
        {
            ActionCode.FULL: (TaskStatus.COMPLETED, "Target full"),
            ActionCode.NOT_ENOUGH_RESOURCES: _OUT_OF_ENERGY,
        }
    )

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        return _agent_empty(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.transfer(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.resource.used

    def progress_message(self) -> str:
        return "Transferring"


class BuildExecutor(BaseExecutor):
    """Advance a construction site. A vanished site is a failure."""

    action_name = "build"
    code_statuses = MappingProxyType({ActionCode.NOT_ENOUGH_RESOURCES: _OUT_OF_ENERGY})

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        return _agent_empty(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.build(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.count(Capability.WORK) * BUILD_POWER

    def progress_message(self) -> str:
        return "Building"


class RepairExecutor(BaseExecutor):
    """Restore a structure's condition. A fully repaired target is done."""

    action_name = "repair"
    code_statuses = MappingProxyType(
        {
            ActionCode.FULL: (TaskStatus.COMPLETED, "Structure repaired"),
            ActionCode.NOT_ENOUGH_RESOURCES: _OUT_OF_ENERGY,
        }
    )

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        return _agent_empty(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.repair(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.count(Capability.WORK) * REPAIR_POWER

    def progress_message(self) -> str:
        return "Repairing"


class UpgradeExecutor(BaseExecutor):
    """Advance the long-running objective from up to three steps away."""

    action_name = "upgrade"
    operating_range = 3
    code_statuses = MappingProxyType({ActionCode.NOT_ENOUGH_RESOURCES: _OUT_OF_ENERGY})

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        return _agent_empty(agent)

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.upgrade(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.count(Capability.WORK) * UPGRADE_POWER

    def progress_message(self) -> str:
        return "Upgrading"
