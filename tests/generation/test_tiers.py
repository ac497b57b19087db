"""Tests for the generator's priority tiers.

Critical Invariants:
- Each tier's priority and demand follow its formula exactly
- Tiers are pure functions of (snapshot, settings)
"""

import pytest

from taskforce import ACCEPT_ALL_DEMAND, Capability, GeneratorSettings, TaskType
from taskforce.generation import (
    ConstructionSiteReport,
    ConstructionTier,
    ContainerReport,
    ControllerReport,
    CriticalRefillTier,
    CriticalRepairTier,
    DefenseTier,
    DroppedResourceReport,
    HostileReport,
    MinorRepairTier,
    ObjectiveTier,
    PositionReport,
    RepairTargetReport,
    ReserveWithdrawalTier,
    SourceReport,
    SpawnReport,
    StoreReport,
    TowerReport,
    UrgentEnergyTier,
    ZoneSnapshot,
    repair_priority,
)

POS = PositionReport(x=10, y=10)
SETTINGS = GeneratorSettings()


def snapshot(**kwargs) -> ZoneSnapshot:
    kwargs.setdefault("zone", "W1N1")
    return ZoneSnapshot(**kwargs)


def by_type(tasks, task_type):
    return [task for task in tasks if task.type is task_type]


# Tier 1: defense


def test_defense_priority_scales_with_threat():
    hostiles = [
        HostileReport(id="h1", pos=POS, body=["attack"] * 4),
        HostileReport(id="h2", pos=POS, body=["heal"]),
    ]
    tasks = DefenseTier().build(snapshot(hostiles=hostiles), SETTINGS)

    # total threat 14 -> level ceil(14 / 5) = 3
    assert [task.target for task in tasks] == ["h1", "h2"]
    assert {task.priority for task in tasks} == {98}
    assert tasks[0].demand == 2
    assert tasks[1].demand == 1
    assert tasks[0].required_capabilities == frozenset({Capability.FIGHT})


def test_no_hostiles_no_defense():
    assert DefenseTier().build(snapshot(), SETTINGS) == []


# Tier 2: urgent energy


def test_pickup_only_above_threshold():
    piles = [
        DroppedResourceReport(id="small", pos=POS, amount=50),
        DroppedResourceReport(id="big", pos=POS, amount=51),
    ]
    generated = UrgentEnergyTier().build(snapshot(dropped_resources=piles), SETTINGS)
    tasks = by_type(generated, TaskType.PICKUP_ENERGY)

    assert [task.target for task in tasks] == ["big"]
    assert tasks[0].priority == 84


def test_harvest_demand_is_slot_count():
    sources = [SourceReport(id="src", pos=POS, energy=0, harvest_slots=3)]
    (task,) = UrgentEnergyTier().build(snapshot(sources=sources), SETTINGS)

    assert task.type is TaskType.HARVEST_ENERGY
    assert task.demand == 3
    assert task.priority == 80
    assert task.target_position.zone == "W1N1"


@pytest.mark.parametrize(("bootstrapped", "priority"), [(False, 98), (True, 82)])
def test_refill_spawn_priority_depends_on_bootstrap(bootstrapped, priority):
    snap = snapshot(
        energy_available=120,
        energy_capacity_available=300,
        economy_bootstrapped=bootstrapped,
        spawns=[SpawnReport(id="spawn", pos=POS, energy=120, energy_capacity=300)],
    )
    (task,) = by_type(UrgentEnergyTier().build(snap, SETTINGS), TaskType.REFILL_SPAWN)

    assert task.priority == priority
    assert task.demand == 4  # ceil(180 / 50)


def test_refill_and_haul_only_with_deficit():
    stores = {
        "spawns": [SpawnReport(id="spawn", pos=POS, energy=300, energy_capacity=300)],
        "extensions": [StoreReport(id="ext", pos=POS, energy=0, energy_capacity=50)],
        "containers": [ContainerReport(id="box", pos=POS, energy=500, energy_capacity=2000)],
    }
    full = snapshot(energy_available=300, energy_capacity_available=300, **stores)
    short = snapshot(energy_available=300, energy_capacity_available=350, **stores)

    assert UrgentEnergyTier().build(full, SETTINGS) == []

    tasks = UrgentEnergyTier().build(short, SETTINGS)
    assert [task.type for task in tasks] == [TaskType.REFILL_EXTENSION, TaskType.HAUL_ENERGY]
    assert tasks[0].priority == 81
    assert tasks[1].priority == 83
    assert tasks[1].demand == ACCEPT_ALL_DEMAND


# Tier 3: critical-structure refill


def test_tower_refill_below_half():
    towers = [
        TowerReport(id="low", pos=POS, energy=100, energy_capacity=1000),
        TowerReport(id="ok", pos=POS, energy=500, energy_capacity=1000),
    ]
    (task,) = CriticalRefillTier().build(snapshot(towers=towers), SETTINGS)

    assert task.target == "low"
    assert task.priority == 91
    assert task.demand == 2  # ceil(900 / 500)


# Tier 4: construction


@pytest.mark.parametrize(
    ("structure_type", "total", "priority", "demand"),
    [
        ("road", 300, 85, 1),
        ("container", 15000, 85, 3),
        ("spawn", 15000, 95, 3),
        ("spawn", 1000, 95, 2),
        ("extension", 3000, 93, 3),
        ("tower", 5000, 92, 2),
    ],
)
def test_construction_formula(structure_type, total, priority, demand):
    site = ConstructionSiteReport(
        id="s", pos=POS, structure_type=structure_type, progress_total=total
    )
    (task,) = ConstructionTier().build(snapshot(construction_sites=[site]), SETTINGS)

    assert (task.priority, task.demand) == (priority, demand)
    assert task.required_capabilities == frozenset({Capability.WORK, Capability.CARRY})


def test_construction_waits_for_bootstrap():
    site = ConstructionSiteReport(id="s", pos=POS, structure_type="road", progress_total=300)
    snap = snapshot(construction_sites=[site], economy_bootstrapped=False)

    assert ConstructionTier().build(snap, SETTINGS) == []


# Tiers 5 and 7: repair


@pytest.mark.parametrize(
    ("structure_type", "hits", "priority"),
    [
        ("spawn", 400, 90),
        ("tower", 600, 70),
        ("road", 200, 50),
        ("road", 500, 30),
    ],
)
def test_repair_priority(structure_type, hits, priority):
    target = RepairTargetReport(
        id="r", pos=POS, structure_type=structure_type, hits=hits, hits_max=1000
    )
    assert repair_priority(target, SETTINGS) == priority


def test_repair_split_between_critical_and_minor():
    targets = [
        RepairTargetReport(id="spawn", pos=POS, structure_type="spawn", hits=100, hits_max=1000),
        RepairTargetReport(id="tower", pos=POS, structure_type="tower", hits=900, hits_max=1000),
        RepairTargetReport(id="road", pos=POS, structure_type="road", hits=100, hits_max=1000),
        RepairTargetReport(id="wall", pos=POS, structure_type="wall", hits=1, hits_max=1000),
        RepairTargetReport(id="intact", pos=POS, structure_type="road", hits=1000, hits_max=1000),
    ]
    snap = snapshot(repair_targets=targets)

    critical = CriticalRepairTier().build(snap, SETTINGS)
    minor = MinorRepairTier().build(snap, SETTINGS)

    assert [task.target for task in critical] == ["spawn"]
    assert [task.target for task in minor] == ["tower", "road"]
    assert all(task.demand == 1 for task in critical + minor)


# Tier 6: objective


@pytest.mark.parametrize(
    ("ticks", "count", "recommended", "priority", "demand"),
    [
        (20000, 1, 3, 40, 2),
        (20000, 3, 3, 40, ACCEPT_ALL_DEMAND),
        (8000, 1, 2, 50, 1),
        (4000, 0, 1, 96, 1),
        (4000, 2, 1, 96, ACCEPT_ALL_DEMAND),
    ],
)
def test_objective_escalation(ticks, count, recommended, priority, demand):
    controller = ControllerReport(
        id="ctrl",
        pos=POS,
        ticks_to_downgrade=ticks,
        upgrader_count=count,
        upgrader_recommendation=recommended,
    )
    (task,) = ObjectiveTier().build(snapshot(controller=controller), SETTINGS)

    assert (task.priority, task.demand) == (priority, demand)


def test_no_controller_no_objective():
    assert ObjectiveTier().build(snapshot(), SETTINGS) == []


# Tier 8: emergency reserve withdrawal


def reserve_snapshot(**overrides) -> ZoneSnapshot:
    values = {
        "energy_available": 300,
        "energy_capacity_available": 300,
        "spawns": [SpawnReport(id="spawn", pos=POS, energy=300, energy_capacity=300)],
        "sources": [SourceReport(id="src", pos=POS, harvest_slots=1, harvesters_present=1)],
        "shortest_ticks_to_live": 500,
    }
    values.update(overrides)
    return snapshot(**values)


def test_withdrawal_when_spawn_energy_wasted():
    (task,) = ReserveWithdrawalTier().build(reserve_snapshot(), SETTINGS)

    assert task.type is TaskType.WITHDRAW_ENERGY
    assert task.priority == 87
    assert task.demand == 2
    assert task.metadata["stock_wasted"] is True


def test_withdrawal_low_priority_when_spawn_busy():
    spawns = [SpawnReport(id="spawn", pos=POS, energy=300, energy_capacity=300, spawning=True)]
    (task,) = ReserveWithdrawalTier().build(reserve_snapshot(spawns=spawns), SETTINGS)

    assert task.priority == 15


@pytest.mark.parametrize(
    "overrides",
    [
        {"economy_bootstrapped": False},
        {"dropped_resources": [DroppedResourceReport(id="pile", pos=POS, amount=200)]},
        {"shortest_ticks_to_live": 79},
        {
            "spawns": [SpawnReport(id="spawn", pos=POS, energy=100, energy_capacity=300)],
            "energy_available": 100,
        },
        {
            "spawns": [
                SpawnReport(id="spawn", pos=POS, energy=300, energy_capacity=300, spawning=True)
            ],
            "sources": [SourceReport(id="src", pos=POS, harvest_slots=2, harvesters_present=1)],
        },
    ],
    ids=["not-bootstrapped", "pickup-available", "lifespan-too-short", "spawn-low", "harvest-open"],
)
def test_withdrawal_suppressed(overrides):
    assert ReserveWithdrawalTier().build(reserve_snapshot(**overrides), SETTINGS) == []


def test_withdrawal_margin_is_configurable():
    settings = GeneratorSettings(replacement_latency_ticks=10, replacement_safety_buffer_ticks=10)
    snap = reserve_snapshot(shortest_ticks_to_live=25)

    assert ReserveWithdrawalTier().build(snap, SETTINGS) == []
    assert len(ReserveWithdrawalTier().build(snap, settings)) == 1
