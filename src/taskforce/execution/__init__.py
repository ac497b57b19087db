"""Execution: executors, the executor registry, and the lifecycle controller.

Usage:
    from taskforce.execution import LifecycleController, build_default_registry

    controller = LifecycleController(actuator, registry=build_default_registry())
    outcome = controller.run(tasks, agents)
"""

from taskforce.execution.executors import (
    BaseExecutor,
    BuildExecutor,
    DefendExecutor,
    HarvestExecutor,
    PickupExecutor,
    RepairExecutor,
    TransferExecutor,
    UpgradeExecutor,
    WithdrawExecutor,
)
from taskforce.execution.lifecycle import LifecycleController
from taskforce.execution.models import WAIT_WHEN_BLOCKED, Executor, LifecycleOutcome
from taskforce.execution.registry import (
    ConfigurationError,
    ExecutorRegistry,
    TaskforceError,
    build_default_registry,
)

__all__ = [
    # Protocol and tables
    "Executor",
    "WAIT_WHEN_BLOCKED",
    # Registry
    "ExecutorRegistry",
    "build_default_registry",
    # Lifecycle
    "LifecycleController",
    "LifecycleOutcome",
    # Errors
    "TaskforceError",
    "ConfigurationError",
    # Executors
    "BaseExecutor",
    "HarvestExecutor",
    "PickupExecutor",
    "WithdrawExecutor",
    "TransferExecutor",
    "BuildExecutor",
    "RepairExecutor",
    "UpgradeExecutor",
    "DefendExecutor",
]
