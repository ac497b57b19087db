"""Task generator: snapshot in, prioritized task list out.

Usage:
    generator = TaskGenerator()
    tasks = generator.generate(snapshot)

    # Custom constants or tier set
    generator = TaskGenerator(settings=GeneratorSettings(build_priority=90))
    generator = TaskGenerator(tiers=(DefenseTier(), UrgentEnergyTier()))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from taskforce.config import GeneratorSettings
from taskforce.generation.tiers import DEFAULT_TIERS, TaskTier
from taskforce.observability import get_logger

if TYPE_CHECKING:
    from taskforce.core.identity import TaskId
    from taskforce.core.task import Task
    from taskforce.generation.snapshot import ZoneSnapshot

logger = get_logger(__name__)


class TaskGenerator:
    """Runs the priority tiers in order and concatenates their output.

    The position of a task in the returned list is its generation order,
    the tie-breaker between equal priorities during assignment.

    Args:
        tiers: Tiers to run, highest first. Defaults to DEFAULT_TIERS.
        settings: Tier constants. Defaults to GeneratorSettings() (environment).
    """

    def __init__(
        self,
        tiers: Sequence[TaskTier] = DEFAULT_TIERS,
        settings: GeneratorSettings | None = None,
    ) -> None:
        self._tiers = tuple(tiers)
        self._settings = settings or GeneratorSettings()

    @property
    def tiers(self) -> tuple[TaskTier, ...]:
        return self._tiers

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    def generate(self, snapshot: ZoneSnapshot) -> list[Task]:
        """Generate this cycle's tasks.

        Args:
            snapshot: Observed zone state.

        Returns:
            Fresh tasks with empty rosters, in generation order. A task id
            produced twice keeps only its first occurrence.
        """
        tasks: list[Task] = []
        seen: set[TaskId] = set()
        for tier in self._tiers:
            produced = tier.build(snapshot, self._settings)
            for task in produced:
                if task.id in seen:
                    logger.warning("task.duplicate_id", task=str(task.id), tier=tier.name)
                    continue
                seen.add(task.id)
                tasks.append(task)
            logger.debug("tier.generated", tier=tier.name, count=len(produced))
        return tasks
