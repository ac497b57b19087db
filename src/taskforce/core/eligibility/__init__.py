"""Eligibility functionality: role, capability, resource and capacity filters."""

from taskforce.core.eligibility.models import (
    ELIGIBLE,
    LOGISTICS_TASKS,
    ROLE_TASK_FILTERS,
    Rejection,
    Verdict,
)
from taskforce.core.eligibility.operations import (
    evaluate,
    has_capabilities,
    resource_permits,
    role_permits,
)

__all__ = [
    "ELIGIBLE",
    "LOGISTICS_TASKS",
    "ROLE_TASK_FILTERS",
    "Rejection",
    "Verdict",
    "evaluate",
    "has_capabilities",
    "resource_permits",
    "role_permits",
]
