"""Priority tiers of the task generator.

Each tier independently turns a snapshot into zero or more tasks. Tiers are
pure: the same snapshot and settings always yield the same tasks, in the
same order.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from taskforce.core.task.models import ACCEPT_ALL_DEMAND, Capability, Task, TaskType

if TYPE_CHECKING:
    from taskforce.config import GeneratorSettings
    from taskforce.generation.snapshot import RepairTargetReport, ZoneSnapshot

CARRY_ONLY = frozenset({Capability.CARRY})
WORK_ONLY = frozenset({Capability.WORK})
WORK_AND_CARRY = frozenset({Capability.WORK, Capability.CARRY})
FIGHT_ONLY = frozenset({Capability.FIGHT})

CRITICAL_STRUCTURE_TYPES = frozenset({"spawn", "tower", "storage", "terminal"})
UNREPAIRED_STRUCTURE_TYPES = frozenset({"wall"})


@runtime_checkable
class TaskTier(Protocol):
    """Protocol for one priority tier of the generator.

    Built-in tiers, in generation order:
    - DefenseTier
    - UrgentEnergyTier
    - CriticalRefillTier
    - ConstructionTier
    - CriticalRepairTier
    - ObjectiveTier
    - MinorRepairTier
    - ReserveWithdrawalTier
    """

    name: str

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        """Compute this tier's tasks.

        Args:
            snapshot: Observed zone state.
            settings: Tunable constants.

        Returns:
            Tasks in a deterministic order, rosters empty.
        """
        ...


class DefenseTier:
    """One defend task per detected hostile, priority scaled by aggregate threat."""

    name = "defense"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        if not snapshot.hostiles:
            return []
        priority = settings.defense_base_priority + snapshot.threat_level
        return [
            Task(
                type=TaskType.DEFEND_ROOM,
                target=hostile.id,
                priority=priority,
                demand=max(1, math.ceil(hostile.threat / settings.defense_threat_per_defender)),
                target_position=snapshot.position(hostile.pos),
                required_capabilities=FIGHT_ONLY,
                metadata={"threat": hostile.threat, "owner": hostile.owner},
            )
            for hostile in snapshot.hostiles
        ]


class UrgentEnergyTier:
    """Loose-resource pickup, extraction, direct top-up of production structures."""

    name = "urgent_energy"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        tasks: list[Task] = []

        for resource in snapshot.dropped_resources:
            if resource.amount <= settings.pickup_min_amount:
                continue
            tasks.append(
                Task(
                    type=TaskType.PICKUP_ENERGY,
                    target=resource.id,
                    priority=settings.pickup_priority,
                    demand=1,
                    target_position=snapshot.position(resource.pos),
                    required_capabilities=CARRY_ONLY,
                    metadata={"energy_amount": resource.amount},
                )
            )

        # Harvest tasks persist even at empty sources so assigned harvesters keep their slot
        for source in snapshot.sources:
            tasks.append(
                Task(
                    type=TaskType.HARVEST_ENERGY,
                    target=source.id,
                    priority=settings.harvest_priority,
                    demand=source.harvest_slots,
                    target_position=snapshot.position(source.pos),
                    required_capabilities=WORK_ONLY,
                    metadata={"energy": source.energy},
                )
            )

        if snapshot.energy_deficit > 0:
            spawn_priority = (
                settings.refill_spawn_priority
                if snapshot.economy_bootstrapped
                else settings.refill_spawn_bootstrap_priority
            )
            for spawn in snapshot.spawns:
                if spawn.free_capacity <= 0:
                    continue
                tasks.append(
                    Task(
                        type=TaskType.REFILL_SPAWN,
                        target=spawn.id,
                        priority=spawn_priority,
                        demand=math.ceil(
                            spawn.free_capacity / settings.refill_spawn_energy_per_agent
                        ),
                        target_position=snapshot.position(spawn.pos),
                        required_capabilities=CARRY_ONLY,
                        metadata={"energy_needed": spawn.free_capacity},
                    )
                )
            for extension in snapshot.extensions:
                if extension.free_capacity <= 0:
                    continue
                tasks.append(
                    Task(
                        type=TaskType.REFILL_EXTENSION,
                        target=extension.id,
                        priority=settings.refill_extension_priority,
                        demand=1,
                        target_position=snapshot.position(extension.pos),
                        required_capabilities=CARRY_ONLY,
                        metadata={"energy_needed": extension.free_capacity},
                    )
                )
            for container in snapshot.containers:
                if container.energy <= settings.haul_min_energy:
                    continue
                tasks.append(
                    Task(
                        type=TaskType.HAUL_ENERGY,
                        target=container.id,
                        priority=settings.haul_priority,
                        demand=ACCEPT_ALL_DEMAND,
                        target_position=snapshot.position(container.pos),
                        required_capabilities=CARRY_ONLY,
                        metadata={"energy_available": container.energy},
                    )
                )

        return tasks


class CriticalRefillTier:
    """Refill active defense emplacements running low."""

    name = "critical_refill"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        tasks: list[Task] = []
        for tower in snapshot.towers:
            if tower.energy >= tower.energy_capacity * settings.tower_refill_threshold:
                continue
            needed = tower.free_capacity
            tasks.append(
                Task(
                    type=TaskType.REFILL_TOWER,
                    target=tower.id,
                    priority=settings.refill_tower_priority,
                    demand=max(1, math.ceil(needed / settings.tower_energy_per_agent)),
                    target_position=snapshot.position(tower.pos),
                    required_capabilities=CARRY_ONLY,
                    metadata={"energy_required": needed},
                )
            )
        return tasks


class ConstructionTier:
    """One build task per in-progress site, boosted for capacity-unlocking structures."""

    name = "construction"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        if not snapshot.economy_bootstrapped:
            return []

        boosts = {
            "spawn": (settings.build_spawn_priority, settings.build_spawn_min_demand),
            "extension": (settings.build_extension_priority, settings.build_extension_min_demand),
            "tower": (settings.build_tower_priority, settings.build_tower_min_demand),
        }

        tasks: list[Task] = []
        for site in snapshot.construction_sites:
            remaining = site.remaining_work
            priority = settings.build_priority
            demand = max(1, math.ceil(remaining / settings.build_work_per_agent))
            if site.structure_type in boosts:
                priority, min_demand = boosts[site.structure_type]
                demand = max(min_demand, demand)
            tasks.append(
                Task(
                    type=TaskType.BUILD,
                    target=site.id,
                    priority=priority,
                    demand=demand,
                    target_position=snapshot.position(site.pos),
                    required_capabilities=WORK_AND_CARRY,
                    metadata={"structure_type": site.structure_type, "remaining_work": remaining},
                )
            )
        return tasks


def repair_priority(target: RepairTargetReport, settings: GeneratorSettings) -> int:
    """Priority of repairing a structure, from its type and condition."""
    if target.structure_type in CRITICAL_STRUCTURE_TYPES:
        if target.condition < settings.repair_critical_structure_threshold:
            return settings.repair_critical_structure_damaged
        return settings.repair_critical_structure_worn
    if target.condition < settings.repair_structure_threshold:
        return settings.repair_structure_damaged
    return settings.repair_structure_worn


def _repair_tasks(
    snapshot: ZoneSnapshot, settings: GeneratorSettings, *, critical: bool
) -> list[Task]:
    tasks: list[Task] = []
    for target in snapshot.repair_targets:
        if target.structure_type in UNREPAIRED_STRUCTURE_TYPES or target.hits >= target.hits_max:
            continue
        priority = repair_priority(target, settings)
        if (priority > settings.critical_repair_cutoff) != critical:
            continue
        tasks.append(
            Task(
                type=TaskType.REPAIR,
                target=target.id,
                priority=priority,
                demand=1,
                target_position=snapshot.position(target.pos),
                required_capabilities=WORK_AND_CARRY,
                metadata={
                    "structure_type": target.structure_type,
                    "hits_needed": target.hits_max - target.hits,
                },
            )
        )
    return tasks


class CriticalRepairTier:
    """Repairs above the critical priority cutoff."""

    name = "critical_repair"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        return _repair_tasks(snapshot, settings, critical=True)


class ObjectiveTier:
    """Continuous upgrade of the central objective, escalating near decay."""

    name = "objective"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        controller = snapshot.controller
        if controller is None:
            return []

        ticks = controller.ticks_to_downgrade
        if ticks < settings.upgrade_critical_ticks:
            priority, risk = settings.upgrade_critical_priority, "critical"
        elif ticks < settings.upgrade_warning_ticks:
            priority, risk = settings.upgrade_warning_priority, "warning"
        else:
            priority, risk = settings.upgrade_priority, "safe"

        shortfall = controller.upgrader_shortfall
        demand = shortfall if shortfall > 0 else ACCEPT_ALL_DEMAND
        if risk != "safe":
            demand = max(1, demand)

        return [
            Task(
                type=TaskType.UPGRADE_CONTROLLER,
                target=controller.id,
                priority=priority,
                demand=demand,
                target_position=snapshot.position(controller.pos),
                required_capabilities=WORK_AND_CARRY,
                metadata={"ticks_to_downgrade": ticks, "downgrade_risk": risk},
            )
        ]


class MinorRepairTier:
    """Repairs at or below the critical priority cutoff."""

    name = "minor_repair"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        return _repair_tasks(snapshot, settings, critical=False)


class ReserveWithdrawalTier:
    """Withdraw from production stock when the economy has no other source.

    Only generated once bootstrapped, with no loose resource to pick up, no
    open extraction slot (unless production stock sits full and unused), and
    enough remaining agent lifespan to cover replacement latency.
    """

    name = "reserve_withdrawal"

    def build(self, snapshot: ZoneSnapshot, settings: GeneratorSettings) -> list[Task]:
        if not snapshot.economy_bootstrapped or not snapshot.spawns:
            return []

        if any(r.amount > settings.pickup_min_amount for r in snapshot.dropped_resources):
            return []

        stock_wasted = (
            all(spawn.is_full for spawn in snapshot.spawns)
            and not any(spawn.spawning for spawn in snapshot.spawns)
            and snapshot.energy_deficit == 0
        )
        harvest_open = any(source.has_open_slot for source in snapshot.sources)
        if harvest_open and not stock_wasted:
            return []

        shortest_ttl = snapshot.shortest_ticks_to_live
        if shortest_ttl is None:
            shortest_ttl = settings.default_ticks_to_live
        margin = settings.replacement_latency_ticks + settings.replacement_safety_buffer_ticks
        if shortest_ttl < margin:
            return []

        priority = settings.withdraw_wasted_priority if stock_wasted else settings.withdraw_priority
        return [
            Task(
                type=TaskType.WITHDRAW_ENERGY,
                target=spawn.id,
                priority=priority,
                demand=settings.withdraw_demand,
                target_position=snapshot.position(spawn.pos),
                required_capabilities=CARRY_ONLY,
                metadata={"emergency_withdrawal": True, "stock_wasted": stock_wasted},
            )
            for spawn in snapshot.spawns
            if spawn.energy > settings.withdraw_min_energy
        ]


DEFAULT_TIERS: tuple[TaskTier, ...] = (
    DefenseTier(),
    UrgentEnergyTier(),
    CriticalRefillTier(),
    ConstructionTier(),
    CriticalRepairTier(),
    ObjectiveTier(),
    MinorRepairTier(),
    ReserveWithdrawalTier(),
)
"""Built-in tiers in generation order (highest first)."""
