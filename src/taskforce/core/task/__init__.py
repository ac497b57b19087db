"""Task functionality: kinds, the Task record, and execution results."""

from taskforce.core.task.models import (
    ACCEPT_ALL_DEMAND,
    IDLE_TASK_ID,
    RESOURCE_FLOWS,
    Capability,
    Position,
    ResourceFlow,
    Task,
    TaskResult,
    TaskStatus,
    TaskType,
    resource_flow,
)

__all__ = [
    "ACCEPT_ALL_DEMAND",
    "IDLE_TASK_ID",
    "RESOURCE_FLOWS",
    "Capability",
    "Position",
    "ResourceFlow",
    "Task",
    "TaskResult",
    "TaskStatus",
    "TaskType",
    "resource_flow",
]
