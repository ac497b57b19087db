"""External integration adapters.

Provides the protocol the host environment implements to carry out agent
actions, and an in-memory implementation for tests and demos:
- Actuator: movement and the terminal world-affecting actions
- RecordingActuator: records calls, returns scripted codes

Usage:
    from taskforce.adapters import Actuator, ActionCode, RecordingActuator
"""

from taskforce.adapters.models import Action, ActionCall, ActionCode
from taskforce.adapters.protocol import Actuator
from taskforce.adapters.recording import RecordingActuator

__all__ = [
    # Protocols
    "Actuator",
    # Implementations
    "RecordingActuator",
    # Types
    "Action",
    "ActionCall",
    "ActionCode",
]
