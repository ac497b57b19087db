"""Task identity models.

Usage:
    task_id = TaskId(TaskType.HARVEST_ENERGY, "source-1")
    str(task_id)  # "harvest_energy:source-1"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taskforce.core.task.models import TaskType


@dataclass(frozen=True, slots=True)
class TaskId:
    """Stable task identifier derived from (type, target).

    A task regenerated next cycle with the same type and target compares equal
    to the previous one, which is what lets rosters survive regeneration.
    """

    type: TaskType
    target: str

    def __hash__(self) -> int:
        return hash((self.type, self.target))

    def __str__(self) -> str:
        return f"{self.type.value}:{self.target}"
