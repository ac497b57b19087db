"""Zone snapshot models.

The snapshot is the data contract with the external sensing collaborator:
plain observed facts, no decisions. Validated with Pydantic so malformed
observations are rejected at the boundary instead of deep inside a tier.

Usage:
    snapshot = ZoneSnapshot(
        zone="W1N1",
        tick=1200,
        energy_available=150,
        energy_capacity_available=300,
        sources=[SourceReport(id="src-1", pos=PositionReport(x=10, y=12), harvest_slots=3)],
    )
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from taskforce.core.task.models import Position


class PositionReport(BaseModel):
    """Observed grid position. The zone is filled in from the snapshot."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def at(self, zone: str) -> Position:
        return Position(x=self.x, y=self.y, zone=zone)


class SourceReport(BaseModel):
    """A renewable extraction node."""

    id: str
    pos: PositionReport
    energy: int = Field(default=0, ge=0)
    energy_capacity: int = Field(default=0, ge=0)
    harvest_slots: int = Field(default=1, ge=0, description="Walkable tiles adjacent to the node")
    harvesters_present: int = Field(default=0, ge=0)

    @property
    def has_open_slot(self) -> bool:
        return self.harvesters_present < self.harvest_slots


class StoreReport(BaseModel):
    """A structure holding the fungible resource."""

    id: str
    pos: PositionReport
    energy: int = Field(default=0, ge=0)
    energy_capacity: int = Field(default=0, ge=0)

    @property
    def free_capacity(self) -> int:
        return max(0, self.energy_capacity - self.energy)

    @property
    def is_full(self) -> bool:
        return self.free_capacity == 0


class SpawnReport(StoreReport):
    """A production structure. Spawning is out of scope; only its state is read."""

    spawning: bool = False


class TowerReport(StoreReport):
    """An active defense emplacement."""


class ContainerReport(StoreReport):
    """A passive storage container."""


class DroppedResourceReport(BaseModel):
    """A loose, unclaimed pile of the resource."""

    id: str
    pos: PositionReport
    amount: int = Field(ge=0)


class ConstructionSiteReport(BaseModel):
    """An in-progress build."""

    id: str
    pos: PositionReport
    structure_type: str
    progress: int = Field(default=0, ge=0)
    progress_total: int = Field(gt=0)

    @property
    def remaining_work(self) -> int:
        return max(0, self.progress_total - self.progress)


class RepairTargetReport(BaseModel):
    """A structure below full condition."""

    id: str
    pos: PositionReport
    structure_type: str
    hits: int = Field(ge=0)
    hits_max: int = Field(gt=0)

    @property
    def condition(self) -> float:
        """Fraction of full condition in [0, 1]."""
        return min(1.0, self.hits / self.hits_max)


class ControllerReport(BaseModel):
    """The long-running objective: continuous upgrade with a decay countdown."""

    id: str
    pos: PositionReport
    level: int = Field(default=0, ge=0)
    progress: int = Field(default=0, ge=0)
    progress_total: int = Field(default=0, ge=0)
    ticks_to_downgrade: int = Field(default=0, ge=0)
    upgrader_count: int = Field(default=0, ge=0)
    upgrader_recommendation: int = Field(default=1, ge=0)

    @property
    def upgrader_shortfall(self) -> int:
        return self.upgrader_recommendation - self.upgrader_count


THREAT_WEIGHTS: dict[str, int] = {"attack": 3, "ranged_attack": 2, "heal": 2, "tough": 1}
"""Threat contributed per hostile body part type."""


class HostileReport(BaseModel):
    """A detected hostile unit."""

    id: str
    pos: PositionReport
    owner: str = ""
    body: list[str] = Field(default_factory=list)

    @property
    def threat(self) -> int:
        return sum(THREAT_WEIGHTS.get(part, 0) for part in self.body)


class ZoneSnapshot(BaseModel):
    """Structured snapshot of one operating zone for one cycle.

    Attributes:
        zone: Operating zone name.
        tick: Cycle number the observation was taken at.
        energy_available: Resource currently held by production structures.
        energy_capacity_available: Their total capacity.
        economy_bootstrapped: Whether the basic supply chain is established.
        shortest_ticks_to_live: Shortest remaining lifespan among the zone's agents.
    """

    zone: str
    tick: int = Field(default=0, ge=0)
    energy_available: int = Field(default=0, ge=0)
    energy_capacity_available: int = Field(default=0, ge=0)
    economy_bootstrapped: bool = True
    shortest_ticks_to_live: int | None = Field(default=None, ge=0)

    sources: list[SourceReport] = Field(default_factory=list)
    spawns: list[SpawnReport] = Field(default_factory=list)
    extensions: list[StoreReport] = Field(default_factory=list)
    towers: list[TowerReport] = Field(default_factory=list)
    containers: list[ContainerReport] = Field(default_factory=list)
    dropped_resources: list[DroppedResourceReport] = Field(default_factory=list)
    construction_sites: list[ConstructionSiteReport] = Field(default_factory=list)
    repair_targets: list[RepairTargetReport] = Field(default_factory=list)
    controller: ControllerReport | None = None
    hostiles: list[HostileReport] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_energy(self) -> ZoneSnapshot:
        if self.energy_available > self.energy_capacity_available:
            raise ValueError(
                f"energy_available {self.energy_available} exceeds "
                f"energy_capacity_available {self.energy_capacity_available}"
            )
        return self

    @property
    def energy_deficit(self) -> int:
        return self.energy_capacity_available - self.energy_available

    @property
    def threat_level(self) -> int:
        """Aggregate threat on a 0-10 scale."""
        if not self.hostiles:
            return 0
        total = sum(hostile.threat for hostile in self.hostiles)
        return min(10, math.ceil(total / 5))

    def position(self, report: PositionReport) -> Position:
        """Resolve an observed position into this zone."""
        return report.at(self.zone)
