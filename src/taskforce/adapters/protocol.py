"""Adapter protocol for the external actuation layer.

The scheduler never moves agents or changes the world itself. Executors
request actions through an Actuator, which the host environment implements.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from taskforce.adapters.models import ActionCode
from taskforce.core.task import Position
from taskforce.core.types import AgentId, TargetRef


@runtime_checkable
class Actuator(Protocol):
    """Protocol for issuing world-affecting actions on behalf of agents.

    Each call is a request for the current cycle; the returned code says
    whether the environment accepted it.

    Usage:
        class GameActuator:
            def harvest(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
                return ActionCode(game.creeps[agent_id].harvest(game.get(target)))
            ...

        controller = LifecycleController(GameActuator())
    """

    def move_to(self, agent_id: AgentId, position: Position, range: int) -> ActionCode:
        """Request movement until within range steps of position.

        Args:
            agent_id: Agent to move.
            position: Destination.
            range: Acceptable distance from the destination.

        Returns:
            OK when a step was taken, TIRED or BUSY when the agent cannot move
            this cycle, NO_PATH when the destination is unreachable.
        """
        ...

    def harvest(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Extract from a renewable node."""
        ...

    def pickup(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Collect a loose resource pile."""
        ...

    def withdraw(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Take resource out of a store."""
        ...

    def transfer(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Deliver all carried resource into a store."""
        ...

    def build(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Advance a construction site."""
        ...

    def repair(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Restore condition of a structure."""
        ...

    def upgrade(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Advance the long-running objective."""
        ...

    def attack(self, agent_id: AgentId, target: TargetRef) -> ActionCode:
        """Attack a hostile unit."""
        ...
