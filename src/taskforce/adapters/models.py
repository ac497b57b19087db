"""Data models for the actuation adapter.

Defines the return codes and call records used by the Actuator protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from taskforce.core.task import Position
from taskforce.core.types import AgentId, TargetRef


class ActionCode(Enum):
    """Environment response to a requested action."""

    OK = "ok"
    NOT_IN_RANGE = "not_in_range"
    NOT_ENOUGH_RESOURCES = "not_enough_resources"
    FULL = "full"  # target (or agent, for acquisition) has no free capacity
    INVALID_TARGET = "invalid_target"
    NO_PATH = "no_path"
    TIRED = "tired"  # agent cannot move this cycle
    BUSY = "busy"  # agent is still being produced
    NO_BODYPART = "no_bodypart"


class Action(Enum):
    """World-affecting actions an executor may request."""

    MOVE_TO = "move_to"
    HARVEST = "harvest"
    PICKUP = "pickup"
    WITHDRAW = "withdraw"
    TRANSFER = "transfer"
    BUILD = "build"
    REPAIR = "repair"
    UPGRADE = "upgrade"
    ATTACK = "attack"


@dataclass(frozen=True, slots=True)
class ActionCall:
    """One recorded actuator call.

    Attributes:
        action: Requested action.
        agent_id: Acting agent.
        target: Target reference (None for movement).
        position: Destination (movement only).
        range: Acceptable distance to the destination (movement only).
        code: Code returned to the caller.
    """

    action: Action
    agent_id: AgentId
    code: ActionCode
    target: TargetRef | None = None
    position: Position | None = None
    range: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "action": self.action.value,
            "agent": self.agent_id,
            "code": self.code.value,
        }
        if self.target is not None:
            result["target"] = self.target
        if self.position is not None:
            result["position"] = {
                "x": self.position.x,
                "y": self.position.y,
                "zone": self.position.zone,
            }
            result["range"] = self.range
        return result
