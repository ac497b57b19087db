"""Suitability weight tables.

The same weights drive both ranking ("is this a good task for me") and
displacement comparisons, so they live in one table.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from taskforce.core.task.models import Capability, TaskType

type Weights = Mapping[Capability, int]

ACQUISITION_WEIGHTS: Weights = MappingProxyType({Capability.WORK: 10, Capability.CARRY: 1})
LOGISTICS_WEIGHTS: Weights = MappingProxyType(
    {Capability.CARRY: 10, Capability.MOVE: 2, Capability.WORK: -3}
)
COMBAT_WEIGHTS: Weights = MappingProxyType({Capability.FIGHT: 10, Capability.MOVE: 1})
CONSTRUCTION_WEIGHTS: Weights = MappingProxyType({Capability.WORK: 5, Capability.CARRY: 5})
OBJECTIVE_WEIGHTS: Weights = MappingProxyType({Capability.WORK: 10, Capability.CARRY: 2})

SUITABILITY_WEIGHTS: Mapping[TaskType, Weights] = MappingProxyType(
    {
        TaskType.HARVEST_ENERGY: ACQUISITION_WEIGHTS,
        TaskType.PICKUP_ENERGY: LOGISTICS_WEIGHTS,
        TaskType.HAUL_ENERGY: LOGISTICS_WEIGHTS,
        TaskType.WITHDRAW_ENERGY: LOGISTICS_WEIGHTS,
        TaskType.REFILL_SPAWN: LOGISTICS_WEIGHTS,
        TaskType.REFILL_EXTENSION: LOGISTICS_WEIGHTS,
        TaskType.REFILL_TOWER: LOGISTICS_WEIGHTS,
        TaskType.BUILD: CONSTRUCTION_WEIGHTS,
        TaskType.REPAIR: CONSTRUCTION_WEIGHTS,
        TaskType.UPGRADE_CONTROLLER: OBJECTIVE_WEIGHTS,
        TaskType.DEFEND_ROOM: COMBAT_WEIGHTS,
    }
)
"""Task type -> capability weights. Types without an entry use an unweighted sum."""
