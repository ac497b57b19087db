"""Executor for defending the zone."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from taskforce.adapters.models import ActionCode
from taskforce.core.task import Capability, TaskStatus
from taskforce.execution.executors.base import BaseExecutor

if TYPE_CHECKING:
    from taskforce.adapters import Actuator
    from taskforce.core.agent import Agent
    from taskforce.core.task import Task

ATTACK_POWER = 30


class DefendExecutor(BaseExecutor):
    """Close in on and attack a hostile. A target that is gone counts as done."""

    action_name = "attack"
    code_statuses = MappingProxyType(
        {ActionCode.INVALID_TARGET: (TaskStatus.COMPLETED, "No hostiles")}
    )

    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        return actuator.attack(agent.id, task.target)

    def work_done(self, agent: Agent) -> int:
        return agent.count(Capability.FIGHT) * ATTACK_POWER

    def progress_message(self) -> str:
        return "Attacking"
