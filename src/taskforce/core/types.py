"""Core type definitions for taskforce."""

type AgentId = str
"""Identity of a mobile worker agent. Assigned by the external spawner."""

type TargetRef = str
"""Reference to the world object a task acts on (source, site, structure, hostile)."""
