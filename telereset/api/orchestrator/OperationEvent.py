"""Events that drive the operation slot, and the legal transitions between states."""

from enum import Enum

from .OperationState import StateTag


class OperationEvent(str, Enum):
    START = "start"
    GATEWAY_SUCCESS = "gateway_success"
    GATEWAY_NEEDS_ELEVATION = "gateway_needs_elevation"
    GATEWAY_ERROR = "gateway_error"
    ELEVATION_DECLINED = "elevation_declined"
    ELEVATION_APPROVED = "elevation_approved"
    ELEVATION_RESOLVED = "elevation_resolved"


# (current state, event) -> next state. Anything absent is illegal.
TRANSITIONS: dict[tuple[StateTag, OperationEvent], StateTag] = {
    (StateTag.IDLE, OperationEvent.START): StateTag.IN_FLIGHT,
    (StateTag.SUCCEEDED, OperationEvent.START): StateTag.IN_FLIGHT,
    (StateTag.FAILED, OperationEvent.START): StateTag.IN_FLIGHT,
    (StateTag.IN_FLIGHT, OperationEvent.GATEWAY_SUCCESS): StateTag.SUCCEEDED,
    (StateTag.IN_FLIGHT, OperationEvent.GATEWAY_NEEDS_ELEVATION): StateTag.NEEDS_ELEVATION,
    (StateTag.IN_FLIGHT, OperationEvent.GATEWAY_ERROR): StateTag.FAILED,
    (StateTag.NEEDS_ELEVATION, OperationEvent.ELEVATION_DECLINED): StateTag.IDLE,
    (StateTag.NEEDS_ELEVATION, OperationEvent.ELEVATION_APPROVED): StateTag.IN_FLIGHT,
    (StateTag.IN_FLIGHT, OperationEvent.ELEVATION_RESOLVED): StateTag.IDLE,
}
