"""Agent functionality: worker records, roles, and resource state."""

from taskforce.core.agent.models import Agent, ResourceState, Role, index_agents

__all__ = [
    "Agent",
    "ResourceState",
    "Role",
    "index_agents",
]
