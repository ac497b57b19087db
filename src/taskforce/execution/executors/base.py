"""Shared execution step for all built-in executors.

Every step follows the same shape:
1. Short-circuit on the agent's own resource state (nothing to deliver,
   no room to collect).
2. Request movement when the agent is known to be out of operating range.
3. Otherwise request the terminal action and translate its code.

Subclasses only name the action, the range, and the codes that mean
something other than failure for them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from taskforce.adapters.models import ActionCode
from taskforce.core.task import TaskResult, TaskStatus

if TYPE_CHECKING:
    from taskforce.adapters import Actuator
    from taskforce.core.agent import Agent
    from taskforce.core.task import Task

MOVE_PROGRESS_CODES = frozenset({ActionCode.OK, ActionCode.TIRED, ActionCode.BUSY})
"""Movement codes meaning the agent is still on its way."""


class BaseExecutor(ABC):
    """Template for a one-action execution step.

    Subclasses must implement `act`, which issues the terminal action and
    returns its code. A subclass missing it cannot be instantiated.

    Class attributes:
        action_name: Label used in diagnostic messages.
        operating_range: Distance at which the terminal action can be performed.
        code_statuses: Non-OK codes that map to something other than FAILED.
    """

    action_name: ClassVar[str] = "action"
    operating_range: ClassVar[int] = 1
    code_statuses: ClassVar[Mapping[ActionCode, tuple[TaskStatus, str]]] = MappingProxyType({})

    def execute(self, agent: Agent, task: Task, actuator: Actuator) -> TaskResult:
        early = self.precheck(agent, task)
        if early is not None:
            return early

        if self.is_at_target(agent, task) is False:
            return self.approach(agent, task, actuator)

        code = self.act(agent, task, actuator)
        if code is ActionCode.OK:
            return TaskResult.in_progress(self.progress_message(), self.work_done(agent))
        if code is ActionCode.NOT_IN_RANGE and task.target_position is not None:
            return self.approach(agent, task, actuator)
        if code in self.code_statuses:
            status, message = self.code_statuses[code]
            return TaskResult(status, message)
        return TaskResult.failed(f"{self.action_name} failed: {code.value}")

    def precheck(self, agent: Agent, task: Task) -> TaskResult | None:
        """Return a result when the step can end without acting, else None."""
        return None

    @abstractmethod
    def act(self, agent: Agent, task: Task, actuator: Actuator) -> ActionCode:
        """Issue the terminal action against the task target."""

    def work_done(self, agent: Agent) -> int:
        """Estimated work performed by a successful action."""
        return 0

    def progress_message(self) -> str:
        return self.action_name.capitalize()

    def is_at_target(self, agent: Agent, task: Task) -> bool | None:
        """Check range to the cached target position.

        Returns:
            None when either position is unknown; the action is then attempted
            and a NOT_IN_RANGE code triggers movement.
        """
        if agent.position is None or task.target_position is None:
            return None
        return agent.position.in_range_to(task.target_position, self.operating_range)

    def approach(self, agent: Agent, task: Task, actuator: Actuator) -> TaskResult:
        """Request one movement step toward the target."""
        if task.target_position is None:
            return TaskResult.failed("Target position unknown")
        code = actuator.move_to(agent.id, task.target_position, self.operating_range)
        if code in MOVE_PROGRESS_CODES:
            return TaskResult.in_progress("Moving to target")
        return TaskResult.failed(f"Failed to move: {code.value}")
