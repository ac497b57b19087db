"""Suitability functionality: task-type-specific weighted capability scores."""

from taskforce.core.suitability.models import SUITABILITY_WEIGHTS, Weights
from taskforce.core.suitability.operations import score, weakest_member

__all__ = [
    "SUITABILITY_WEIGHTS",
    "Weights",
    "score",
    "weakest_member",
]
