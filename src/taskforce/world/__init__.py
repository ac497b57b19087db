"""World: the per-zone coordinator and its cycle report."""

from taskforce.world.colony import Colony
from taskforce.world.result import CycleReport

__all__ = [
    "Colony",
    "CycleReport",
]
