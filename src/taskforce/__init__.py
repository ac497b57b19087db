"""Taskforce: priority-driven task scheduling for a colony of worker agents.

Usage:
    from taskforce import Colony, RecordingActuator, ZoneSnapshot, setup_logging

    setup_logging()
    colony = Colony("W1N1", RecordingActuator())

    snapshot = ZoneSnapshot.model_validate(observed_state)
    report = colony.run_cycle(snapshot, agents)
    for task in report.tasks:
        print(task.id, task.priority, task.roster)
"""

__version__ = "0.1.0"

# Adapters
from taskforce.adapters import Action, ActionCode, Actuator, RecordingActuator

# Configuration
from taskforce.config import GeneratorSettings, LoggingSettings

# Core primitives
from taskforce.core import (
    ACCEPT_ALL_DEMAND,
    IDLE_TASK_ID,
    ROLE_TASK_FILTERS,
    SUITABILITY_WEIGHTS,
    Agent,
    AgentId,
    Capability,
    Position,
    ResourceState,
    Role,
    Task,
    TaskId,
    TaskResult,
    TaskStatus,
    TaskType,
    score,
)

# Execution
from taskforce.execution import (
    WAIT_WHEN_BLOCKED,
    ConfigurationError,
    Executor,
    ExecutorRegistry,
    LifecycleController,
    TaskforceError,
    build_default_registry,
)

# Generation
from taskforce.generation import TaskGenerator, TaskTier, ZoneSnapshot

# Observability
from taskforce.observability import get_logger, setup_logging

# Scheduling
from taskforce.scheduling import AssignmentEngine, TaskReconciler, reconcile

# Tracing (optional)
from taskforce.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

# World
from taskforce.world import Colony, CycleReport

__all__ = [
    # Version
    "__version__",
    # Core
    "ACCEPT_ALL_DEMAND",
    "IDLE_TASK_ID",
    "Agent",
    "AgentId",
    "Capability",
    "Position",
    "ResourceState",
    "Role",
    "Task",
    "TaskId",
    "TaskResult",
    "TaskStatus",
    "TaskType",
    "ROLE_TASK_FILTERS",
    "SUITABILITY_WEIGHTS",
    "score",
    # Generation
    "TaskGenerator",
    "TaskTier",
    "ZoneSnapshot",
    # Scheduling
    "TaskReconciler",
    "AssignmentEngine",
    "reconcile",
    # Execution
    "Executor",
    "ExecutorRegistry",
    "LifecycleController",
    "WAIT_WHEN_BLOCKED",
    "build_default_registry",
    "TaskforceError",
    "ConfigurationError",
    # Adapters
    "Actuator",
    "Action",
    "ActionCode",
    "RecordingActuator",
    # World
    "Colony",
    "CycleReport",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
    # Configuration
    "GeneratorSettings",
    "LoggingSettings",
    "setup_logging",
    "get_logger",
]
