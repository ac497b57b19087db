"""Executor registry: static task type -> executor dispatch table.

Built once at startup and never mutated. Use with_overrides to derive a
registry with replaced or additional executors.

Usage:
    registry = build_default_registry()
    executor = registry.get(TaskType.BUILD)

    # Swap one executor (tests, extensions)
    registry = registry.with_overrides({TaskType.BUILD: MyBuildExecutor()})
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from taskforce.core.task import TaskType
from taskforce.execution.executors import (
    BuildExecutor,
    DefendExecutor,
    HarvestExecutor,
    PickupExecutor,
    RepairExecutor,
    TransferExecutor,
    UpgradeExecutor,
    WithdrawExecutor,
)
from taskforce.execution.models import Executor


class TaskforceError(Exception):
    """Base class for taskforce errors."""


class ConfigurationError(TaskforceError):
    """Raised when the scheduler is wired incorrectly."""


class ExecutorRegistry:
    """Immutable mapping from task type to executor.

    Args:
        executors: Task type -> executor.

    Raises:
        TypeError: If a key is not a TaskType.
        ConfigurationError: If the idle sentinel is given an executor.
    """

    def __init__(self, executors: Mapping[TaskType, Executor] | None = None) -> None:
        table = dict(executors or {})
        for task_type in table:
            if not isinstance(task_type, TaskType):
                raise TypeError(f"Expected TaskType key, got {type(task_type).__name__}")
        if TaskType.IDLE in table:
            raise ConfigurationError("The idle sentinel is never executed")
        self._executors: Mapping[TaskType, Executor] = MappingProxyType(table)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[TaskType, Executor]]) -> ExecutorRegistry:
        """Build a registry, rejecting a task type registered twice.

        Raises:
            ConfigurationError: On a duplicate task type.
        """
        table: dict[TaskType, Executor] = {}
        for task_type, executor in pairs:
            if task_type in table:
                raise ConfigurationError(f"Executor for {task_type} registered twice")
            table[task_type] = executor
        return cls(table)

    def get(self, task_type: TaskType) -> Executor | None:
        """Get the executor for a task type, or None if unregistered."""
        return self._executors.get(task_type)

    def with_overrides(self, executors: Mapping[TaskType, Executor]) -> ExecutorRegistry:
        """Derive a new registry with executors added or replaced."""
        return ExecutorRegistry({**self._executors, **executors})

    def without(self, *task_types: TaskType) -> ExecutorRegistry:
        """Derive a new registry with some task types unregistered."""
        return ExecutorRegistry(
            {t: e for t, e in self._executors.items() if t not in task_types}
        )

    @property
    def task_types(self) -> frozenset[TaskType]:
        return frozenset(self._executors)

    def __contains__(self, task_type: object) -> bool:
        return task_type in self._executors

    def __iter__(self) -> Iterator[TaskType]:
        return iter(self._executors)

    def __len__(self) -> int:
        return len(self._executors)


def build_default_registry() -> ExecutorRegistry:
    """Registry covering every schedulable task type."""
    transfer = TransferExecutor()
    withdraw = WithdrawExecutor()
    return ExecutorRegistry.from_pairs(
        [
            (TaskType.HARVEST_ENERGY, HarvestExecutor()),
            (TaskType.PICKUP_ENERGY, PickupExecutor()),
            (TaskType.WITHDRAW_ENERGY, withdraw),
            (TaskType.HAUL_ENERGY, withdraw),
            (TaskType.REFILL_SPAWN, transfer),
            (TaskType.REFILL_EXTENSION, transfer),
            (TaskType.REFILL_TOWER, transfer),
            (TaskType.BUILD, BuildExecutor()),
            (TaskType.REPAIR, RepairExecutor()),
            (TaskType.UPGRADE_CONTROLLER, UpgradeExecutor()),
            (TaskType.DEFEND_ROOM, DefendExecutor()),
        ]
    )
