"""Integration tests for the colony coordinator.

Critical Invariants:
- Phases run Generator -> Reconciler -> Assignment -> Lifecycle
- Only the reconciled task list carries between cycles
- Identical inputs give identical cycles
- One colony schedules one zone
"""

import copy

import pytest
from conftest import make_agent

from taskforce import (
    Action,
    ActionCode,
    Colony,
    InMemoryHistoryStore,
    RecordingActuator,
    Role,
    TaskType,
    ZoneSnapshot,
)
from taskforce.generation import (
    ConstructionSiteReport,
    ControllerReport,
    PositionReport,
    SourceReport,
    SpawnReport,
)

POS = PositionReport(x=20, y=20)


def zone_snapshot(tick: int = 1, **overrides) -> ZoneSnapshot:
    values = {
        "zone": "W1N1",
        "tick": tick,
        "energy_available": 200,
        "energy_capacity_available": 300,
        "sources": [SourceReport(id="src-1", pos=POS, energy=3000, harvest_slots=2)],
        "spawns": [SpawnReport(id="spawn-1", pos=POS, energy=200, energy_capacity=300)],
        "construction_sites": [
            ConstructionSiteReport(
                id="site-1", pos=POS, structure_type="extension", progress_total=3000
            )
        ],
        "controller": ControllerReport(id="ctrl", pos=POS, ticks_to_downgrade=20000),
    }
    values.update(overrides)
    return ZoneSnapshot(**values)


def colony_agents():
    return [
        make_agent("harvester-1", work=5, role=Role.HARVESTER),
        make_agent("hauler-1", carry=4, used=200, role=Role.HAULER),
        make_agent("worker-1", work=2, carry=2, used=100, role=Role.WORKER),
        make_agent("worker-2", work=1, carry=1, used=0, role=Role.WORKER),
    ]


def test_single_cycle_assigns_by_priority():
    agents = colony_agents()
    report = Colony("W1N1", RecordingActuator()).run_cycle(zone_snapshot(), agents)

    assignments = {agent.id: agent.assignment for agent in agents}
    assert assignments["harvester-1"].type is TaskType.HARVEST_ENERGY
    assert assignments["hauler-1"].type is TaskType.REFILL_SPAWN
    assert assignments["worker-1"].type is TaskType.BUILD
    assert assignments["worker-2"].type is TaskType.HARVEST_ENERGY
    assert [task.type for task in report.tasks] == [
        TaskType.HARVEST_ENERGY,
        TaskType.REFILL_SPAWN,
        TaskType.BUILD,
        TaskType.UPGRADE_CONTROLLER,
    ]


def test_rosters_carry_across_cycles():
    colony = Colony("W1N1", RecordingActuator())
    agents = colony_agents()

    colony.run_cycle(zone_snapshot(tick=1), agents)
    build_roster = next(task for task in colony.tasks if task.type is TaskType.BUILD).roster
    report = colony.run_cycle(zone_snapshot(tick=2), agents)

    build = next(task for task in report.tasks if task.type is TaskType.BUILD)
    assert build.roster == build_roster == ["worker-1"]
    assert colony.cycles == 2


def test_vanished_target_releases_agents():
    colony = Colony("W1N1", RecordingActuator())
    agents = colony_agents()
    colony.run_cycle(zone_snapshot(tick=1), agents)

    report = colony.run_cycle(zone_snapshot(tick=2, construction_sites=[]), agents)

    assert "worker-1" in report.reconcile.released
    worker = agents[2]
    assert worker.assignment is None or worker.assignment.type is not TaskType.BUILD


def test_completion_frees_agent_for_next_cycle():
    actuator = RecordingActuator()
    actuator.set_code(Action.TRANSFER, ActionCode.FULL)
    colony = Colony("W1N1", actuator)
    agents = colony_agents()

    report = colony.run_cycle(zone_snapshot(), agents)

    assert "hauler-1" in report.lifecycle.released
    assert agents[1].assignment is None
    spawn_task = next(task for task in report.tasks if task.type is TaskType.REFILL_SPAWN)
    assert "hauler-1" not in spawn_task.roster


def test_cycles_are_deterministic():
    reports = []
    for _ in range(2):
        colony = Colony("W1N1", RecordingActuator())
        agents = copy.deepcopy(colony_agents())
        colony.run_cycle(zone_snapshot(tick=1), agents)
        report = colony.run_cycle(zone_snapshot(tick=2), agents)
        data = report.to_dict()
        data.pop("phase_timings")
        reports.append(data)

    assert reports[0] == reports[1]


def test_zone_mismatch_rejected():
    with pytest.raises(ValueError, match="zone"):
        Colony("W2N2", RecordingActuator()).run_cycle(zone_snapshot(), [])


def test_history_records_each_cycle():
    store = InMemoryHistoryStore(max_ticks=10)
    colony = Colony("W1N1", RecordingActuator(), history=store)
    agents = colony_agents()

    colony.run_cycle(zone_snapshot(tick=5), agents)
    colony.run_cycle(zone_snapshot(tick=6), agents)

    assert store.get_tick_range() == (5, 6)
    record = store.get_tick(5)
    assert record.zone == "W1N1"
    assert set(record.phase_timings) == {"generate", "reconcile", "assign", "execute"}
    assigned = [event for event in store.get_events(5, 5) if event["type"] == "assigned"]
    assert {event["agent"] for event in assigned} == {agent.id for agent in agents}
