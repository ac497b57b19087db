"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from taskforce import (
    Agent,
    Capability,
    Position,
    RecordingActuator,
    ResourceState,
    Role,
    Task,
    TaskType,
)


def make_agent(
    agent_id: str,
    *,
    work: int = 0,
    carry: int = 0,
    fight: int = 0,
    move: int = 1,
    used: int = 0,
    capacity: int | None = None,
    role: Role | None = None,
    position: Position | None = None,
) -> Agent:
    """Build an agent from unit counts. Capacity defaults to 50 per carry unit."""
    counts = {
        Capability.WORK: work,
        Capability.CARRY: carry,
        Capability.FIGHT: fight,
        Capability.MOVE: move,
    }
    return Agent(
        id=agent_id,
        capabilities={capability: n for capability, n in counts.items() if n},
        resource=ResourceState(used=used, capacity=carry * 50 if capacity is None else capacity),
        role=role,
        position=position,
    )


def make_task(
    task_type: TaskType,
    target: str,
    *,
    priority: int = 50,
    demand: int = 1,
    capabilities: frozenset[Capability] = frozenset(),
    position: Position | None = None,
) -> Task:
    return Task(
        type=task_type,
        target=target,
        priority=priority,
        demand=demand,
        required_capabilities=capabilities,
        target_position=position,
    )


@pytest.fixture
def actuator() -> RecordingActuator:
    """Fresh RecordingActuator returning OK for everything."""
    return RecordingActuator()


@pytest.fixture
def worker() -> Agent:
    """General-purpose agent holding some energy."""
    return make_agent("worker-1", work=2, carry=2, used=50, role=Role.WORKER)


@pytest.fixture
def harvester() -> Agent:
    """Extraction-only agent with no carry units."""
    return make_agent("harvester-1", work=5, role=Role.HARVESTER)


@pytest.fixture
def hauler() -> Agent:
    """Empty logistics agent."""
    return make_agent("hauler-1", carry=4, move=2, role=Role.HAULER)
