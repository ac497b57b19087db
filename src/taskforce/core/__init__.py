"""Core functionalities: stateless models and pure operations.

Architecture Note:
    core/ contains pure, stateless building blocks: identities, records, weight
    and filter tables, and the functions that evaluate them. Nothing here
    mutates scheduling state. For the stateful per-cycle services, see
    generation/, scheduling/, execution/ and world/.
"""

from taskforce.core.agent import Agent, ResourceState, Role, index_agents
from taskforce.core.eligibility import (
    ROLE_TASK_FILTERS,
    Rejection,
    Verdict,
    evaluate,
    has_capabilities,
    resource_permits,
    role_permits,
)
from taskforce.core.identity import TaskId
from taskforce.core.suitability import SUITABILITY_WEIGHTS, Weights, score, weakest_member
from taskforce.core.task import (
    ACCEPT_ALL_DEMAND,
    IDLE_TASK_ID,
    Capability,
    Position,
    ResourceFlow,
    Task,
    TaskResult,
    TaskStatus,
    TaskType,
    resource_flow,
)
from taskforce.core.types import AgentId, TargetRef

__all__ = [
    # Types
    "AgentId",
    "TargetRef",
    # Identity
    "TaskId",
    # Task
    "ACCEPT_ALL_DEMAND",
    "IDLE_TASK_ID",
    "Capability",
    "Position",
    "ResourceFlow",
    "Task",
    "TaskResult",
    "TaskStatus",
    "TaskType",
    "resource_flow",
    # Agent
    "Agent",
    "ResourceState",
    "Role",
    "index_agents",
    # Suitability
    "SUITABILITY_WEIGHTS",
    "Weights",
    "score",
    "weakest_member",
    # Eligibility
    "ROLE_TASK_FILTERS",
    "Rejection",
    "Verdict",
    "evaluate",
    "has_capabilities",
    "resource_permits",
    "role_permits",
]
