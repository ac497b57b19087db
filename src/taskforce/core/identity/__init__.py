"""Task identity functionality: stable ids derived from (type, target)."""

from taskforce.core.identity.models import TaskId

__all__ = [
    "TaskId",
]
