"""Agent models.

Agents are created and destroyed by external collaborators. The scheduler
only ever writes `assignment` and reads everything else.

Usage:
    agent = Agent(
        id="worker-1",
        capabilities={Capability.WORK: 2, Capability.CARRY: 1},
        resource=ResourceState(used=0, capacity=50),
        role=Role.WORKER,
    )
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto

from taskforce.core.identity import TaskId
from taskforce.core.task.models import IDLE_TASK_ID, Capability, Position
from taskforce.core.types import AgentId


class Role(StrEnum):
    """Specialization tags. Some restrict which task types an agent may take."""

    HARVESTER = auto()
    HAULER = auto()
    BUILDER = auto()
    UPGRADER = auto()
    DEFENDER = auto()
    WORKER = auto()


@dataclass(frozen=True, slots=True)
class ResourceState:
    """Used/free capacity of the single fungible resource."""

    used: int = 0
    capacity: int = 0

    def __post_init__(self) -> None:
        if self.used < 0 or self.capacity < 0:
            raise ValueError(f"Resource amounts must be non-negative: {self.used}/{self.capacity}")
        if self.used > self.capacity:
            raise ValueError(f"Used {self.used} exceeds capacity {self.capacity}")

    @property
    def free(self) -> int:
        return self.capacity - self.used

    @property
    def is_empty(self) -> bool:
        return self.used == 0

    @property
    def is_full(self) -> bool:
        return self.free == 0


@dataclass
class Agent:
    """A mobile worker unit with capability counts and a single assignment slot.

    Attributes:
        id: Unique agent identity.
        capabilities: Capability tag -> unit count.
        resource: Carried resource state.
        role: Optional hard specialization filter.
        position: Last known position (None if unknown).
        ticks_to_live: Remaining lifespan, if the agent ages.
        assignment: Current task id, the idle sentinel, or None.
    """

    id: AgentId
    capabilities: dict[Capability, int] = field(default_factory=dict)
    resource: ResourceState = field(default_factory=ResourceState)
    role: Role | None = None
    position: Position | None = None
    ticks_to_live: int | None = None
    assignment: TaskId | None = None

    def count(self, capability: Capability) -> int:
        """Units held of a capability (0 if absent)."""
        return self.capabilities.get(capability, 0)

    def has(self, capability: Capability) -> bool:
        return self.count(capability) > 0

    @property
    def is_idle(self) -> bool:
        """True when the agent is unassigned or parked on the idle sentinel."""
        return self.assignment is None or self.assignment == IDLE_TASK_ID


def index_agents(agents: Iterable[Agent] | Mapping[AgentId, Agent]) -> dict[AgentId, Agent]:
    """Build an id -> agent mapping, preserving input order.

    Args:
        agents: Agents as a sequence or an existing mapping.

    Returns:
        New dict keyed by agent id.

    Raises:
        ValueError: If two agents share an id.
    """
    if isinstance(agents, Mapping):
        return dict(agents)
    indexed: dict[AgentId, Agent] = {}
    for agent in agents:
        if agent.id in indexed:
            raise ValueError(f"Duplicate agent id: {agent.id}")
        indexed[agent.id] = agent
    return indexed
