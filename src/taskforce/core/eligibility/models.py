"""Eligibility models: the role filter table and filter verdicts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType

from taskforce.core.agent.models import Role
from taskforce.core.task.models import TaskType
from taskforce.core.types import AgentId

LOGISTICS_TASKS: frozenset[TaskType] = frozenset(
    {
        TaskType.PICKUP_ENERGY,
        TaskType.HAUL_ENERGY,
        TaskType.WITHDRAW_ENERGY,
        TaskType.REFILL_SPAWN,
        TaskType.REFILL_EXTENSION,
        TaskType.REFILL_TOWER,
    }
)

ROLE_TASK_FILTERS: Mapping[Role, frozenset[TaskType]] = MappingProxyType(
    {
        Role.HARVESTER: frozenset({TaskType.HARVEST_ENERGY}),
        Role.HAULER: LOGISTICS_TASKS,
        Role.DEFENDER: frozenset({TaskType.DEFEND_ROOM}),
    }
)
"""Role -> the only task types it may take. Roles not listed are unrestricted."""


class Rejection(StrEnum):
    """Why an agent is not eligible for a task. Filters run in this order."""

    ROLE = auto()
    CAPABILITY = auto()
    RESOURCE = auto()
    CAPACITY = auto()


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of the eligibility filter chain for one (agent, task) pair.

    Attributes:
        rejection: First failing filter, or None when eligible.
        evict: Roster member to displace when the task is full, else None.
    """

    rejection: Rejection | None = None
    evict: AgentId | None = None

    @property
    def eligible(self) -> bool:
        return self.rejection is None

    @property
    def displaces(self) -> bool:
        return self.evict is not None


ELIGIBLE = Verdict()
