"""Scheduling: task reconciliation and assignment.

Usage:
    from taskforce.scheduling import AssignmentEngine, TaskReconciler

    merged = TaskReconciler().reconcile(new_tasks, previous_tasks, agents)
    outcome = AssignmentEngine().assign(merged.tasks, agents)
"""

from taskforce.scheduling.assignment import AssignmentEngine, rank_tasks
from taskforce.scheduling.models import AssignmentOutcome, Eviction, ReconcileOutcome
from taskforce.scheduling.reconciler import TaskReconciler, merge_tasks, reconcile

__all__ = [
    # Reconciler
    "TaskReconciler",
    "ReconcileOutcome",
    "merge_tasks",
    "reconcile",
    # Assignment
    "AssignmentEngine",
    "AssignmentOutcome",
    "Eviction",
    "rank_tasks",
]
