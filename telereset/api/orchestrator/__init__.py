"""Operation slot, orchestrator and elevation sub-flow."""

from .ask_confirmer import Confirmer, ask_confirmer
from .ElevationFlow import ElevationFlow
from .ElevationResult import ElevationResult
from .InvalidTransitionError import InvalidTransitionError
from .OperationContext import OperationContext
from .OperationEvent import TRANSITIONS, OperationEvent
from .OperationState import Failed, Idle, InFlight, NeedsElevation, OperationState, StateTag, Succeeded
from .Orchestrator import Orchestrator

__all__ = [
    "Confirmer",
    "ElevationFlow",
    "ElevationResult",
    "Failed",
    "Idle",
    "InFlight",
    "InvalidTransitionError",
    "NeedsElevation",
    "OperationContext",
    "OperationEvent",
    "OperationState",
    "Orchestrator",
    "StateTag",
    "Succeeded",
    "TRANSITIONS",
    "ask_confirmer",
]
