"""Built-in executors, one per family of task types."""

from taskforce.execution.executors.base import MOVE_PROGRESS_CODES, BaseExecutor
from taskforce.execution.executors.combat import DefendExecutor
from taskforce.execution.executors.delivery import (
    BuildExecutor,
    RepairExecutor,
    TransferExecutor,
    UpgradeExecutor,
)
from taskforce.execution.executors.energy import HarvestExecutor, PickupExecutor, WithdrawExecutor

__all__ = [
    "BaseExecutor",
    "MOVE_PROGRESS_CODES",
    # Collection
    "HarvestExecutor",
    "PickupExecutor",
    "WithdrawExecutor",
    # Delivery
    "TransferExecutor",
    "BuildExecutor",
    "RepairExecutor",
    "UpgradeExecutor",
    # Combat
    "DefendExecutor",
]
