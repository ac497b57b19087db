"""Tests for snapshot validation and derived values."""

import pytest
from pydantic import ValidationError

from taskforce.generation import (
    ConstructionSiteReport,
    ControllerReport,
    HostileReport,
    PositionReport,
    RepairTargetReport,
    ZoneSnapshot,
)

ORIGIN = PositionReport(x=0, y=0)


def test_energy_above_capacity_rejected():
    with pytest.raises(ValidationError, match="exceeds"):
        ZoneSnapshot(zone="W1N1", energy_available=400, energy_capacity_available=300)


def test_negative_amounts_rejected():
    with pytest.raises(ValidationError):
        RepairTargetReport(id="r", pos=ORIGIN, structure_type="road", hits=-5, hits_max=100)


def test_model_validate_from_plain_dict():
    snapshot = ZoneSnapshot.model_validate(
        {
            "zone": "W1N1",
            "tick": 7,
            "energy_available": 100,
            "energy_capacity_available": 300,
            "sources": [{"id": "src-1", "pos": {"x": 3, "y": 4}, "harvest_slots": 2}],
        }
    )

    assert snapshot.energy_deficit == 200
    assert snapshot.position(snapshot.sources[0].pos).zone == "W1N1"


@pytest.mark.parametrize(
    ("bodies", "expected"),
    [
        ([], 0),
        ([["attack"]], 1),
        ([["attack", "attack", "heal"]], 2),
        ([["tough"] * 60], 10),
        ([["attack"] * 5, ["ranged_attack"] * 5], 5),
    ],
)
def test_threat_level(bodies, expected):
    hostiles = [HostileReport(id=f"h{i}", pos=ORIGIN, body=body) for i, body in enumerate(bodies)]
    snapshot = ZoneSnapshot(zone="W1N1", hostiles=hostiles)

    assert snapshot.threat_level == expected


def test_hostile_threat_weights():
    body = ["attack", "ranged_attack", "heal", "tough", "move"]
    hostile = HostileReport(id="h", pos=ORIGIN, body=body)
    assert hostile.threat == 3 + 2 + 2 + 1


def test_derived_report_values():
    site = ConstructionSiteReport(
        id="s", pos=ORIGIN, structure_type="road", progress=100, progress_total=300
    )
    target = RepairTargetReport(id="r", pos=ORIGIN, structure_type="road", hits=250, hits_max=1000)
    controller = ControllerReport(
        id="c", pos=ORIGIN, upgrader_count=1, upgrader_recommendation=3
    )

    assert site.remaining_work == 200
    assert target.condition == 0.25
    assert controller.upgrader_shortfall == 2
