"""Task generation: snapshot models, priority tiers, and the generator.

Usage:
    from taskforce.generation import TaskGenerator, ZoneSnapshot

    snapshot = ZoneSnapshot.model_validate(observed)
    tasks = TaskGenerator().generate(snapshot)
"""

from taskforce.generation.generator import TaskGenerator
from taskforce.generation.snapshot import (
    THREAT_WEIGHTS,
    ConstructionSiteReport,
    ContainerReport,
    ControllerReport,
    DroppedResourceReport,
    HostileReport,
    PositionReport,
    RepairTargetReport,
    SourceReport,
    SpawnReport,
    StoreReport,
    TowerReport,
    ZoneSnapshot,
)
from taskforce.generation.tiers import (
    CRITICAL_STRUCTURE_TYPES,
    DEFAULT_TIERS,
    ConstructionTier,
    CriticalRefillTier,
    CriticalRepairTier,
    DefenseTier,
    MinorRepairTier,
    ObjectiveTier,
    ReserveWithdrawalTier,
    TaskTier,
    UrgentEnergyTier,
    repair_priority,
)

__all__ = [
    # Generator
    "TaskGenerator",
    # Snapshot
    "ZoneSnapshot",
    "PositionReport",
    "SourceReport",
    "StoreReport",
    "SpawnReport",
    "TowerReport",
    "ContainerReport",
    "DroppedResourceReport",
    "ConstructionSiteReport",
    "RepairTargetReport",
    "ControllerReport",
    "HostileReport",
    "THREAT_WEIGHTS",
    # Tiers
    "TaskTier",
    "DEFAULT_TIERS",
    "DefenseTier",
    "UrgentEnergyTier",
    "CriticalRefillTier",
    "ConstructionTier",
    "CriticalRepairTier",
    "ObjectiveTier",
    "MinorRepairTier",
    "ReserveWithdrawalTier",
    "CRITICAL_STRUCTURE_TYPES",
    "repair_priority",
]
