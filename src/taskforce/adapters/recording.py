"""In-memory actuator that records calls and returns scripted codes.

Usage:
    actuator = RecordingActuator()
    actuator.set_code(Action.HARVEST, ActionCode.NOT_ENOUGH_RESOURCES, agent_id="h-1")

    controller = LifecycleController(actuator)
    controller.run(tasks, agents)
    actuator.calls_for("h-1")  # [ActionCall(action=Action.HARVEST, ...)]
"""

from __future__ import annotations

from taskforce.adapters.models import Action, ActionCall, ActionCode
from taskforce.core.task import Position
from taskforce.core.types import AgentId, TargetRef


class RecordingActuator:
    """Actuator that never touches a world.

    Codes are looked up per (action, agent) first, then per action, then
    fall back to `default`.

    Args:
        default: Code returned when nothing is scripted.
    """

    def __init__(self, default: ActionCode = ActionCode.OK) -> None:
        self.default = default
        self.calls: list[ActionCall] = []
        self._codes: dict[tuple[Action, AgentId | None], ActionCode] = {}

    def set_code(self, action: Action, code: ActionCode, agent_id: AgentId | None = None) -> None:
        """Script the code returned for an action, optionally for one agent only."""
        self._codes[(action, agent_id)] = code

    def clear(self) -> None:
        """Forget recorded calls. Scripted codes are kept."""
        self.calls.clear()

    def calls_for(self, agent_id: AgentId) -> list[ActionCall]:
        return [call for call in self.calls if call.agent_id == agent_id]

    def actions_for(self, agent_id: AgentId) -> list[Action]:
        return [call.action for call in self.calls_for(agent_id)]

    def _respond(
        self,
        action: Action,
        agent_id: AgentId,
        target: TargetRef | None = None,
        position: Position | None = None,
        range: int | None = None,
    ) -> ActionCode:
        code = self._codes.get((action, agent_id), self._codes.get((action, None), self.default))
        self.calls.append(
            ActionCall(
                action=action,
                agent_id=agent_id,
                code=code,
                target=target,
                position=position,
                range=range,
            )
        )
        return code

    def move_to(self, agent_id: AgentId, position: Position, range: int) -> ActionCode:
        return self._respond(Action.MOVE_TO, agent_id, position=position, range=range)

    def harvest(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.HARVEST, agent_id, target)

    def pickup(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.PICKUP, agent_id, target)

    def withdraw(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.WITHDRAW, agent_id, target)

    def transfer(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.TRANSFER, agent_id, target)

    def build(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.BUILD, agent_id, target)

    def repair(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.REPAIR, agent_id, target)

    def upgrade(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.UPGRADE, agent_id, target)

    def attack(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        return self._respond(Action.ATTACK, agent_id, target)
