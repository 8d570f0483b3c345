"""The operation slot's tagged states."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Union

from ..gateway.GatewayError import ErrorKind
from ..gateway.OperationKind import OperationKind
from ..gateway.OperationOutcome import OperationOutcome


class StateTag(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NEEDS_ELEVATION = "needs_elevation"


@dataclass(frozen=True)
class Idle:
    tag: ClassVar[StateTag] = StateTag.IDLE

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value}


@dataclass(frozen=True)
class InFlight:
    kind: OperationKind
    started_at: datetime
    tag: ClassVar[StateTag] = StateTag.IN_FLIGHT

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value, "kind": self.kind.name, "started_at": self.started_at.isoformat()}


@dataclass(frozen=True)
class Succeeded:
    kind: OperationKind
    result: OperationOutcome
    tag: ClassVar[StateTag] = StateTag.SUCCEEDED

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value, "kind": self.kind.name, "result": self.result.to_dict()}


@dataclass(frozen=True)
class Failed:
    kind: OperationKind
    error_kind: ErrorKind
    message: str
    tag: ClassVar[StateTag] = StateTag.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value, "kind": self.kind.name, "error_kind": self.error_kind.value, "message": self.message}


@dataclass(frozen=True)
class NeedsElevation:
    kind: OperationKind
    message: str
    tag: ClassVar[StateTag] = StateTag.NEEDS_ELEVATION

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag.value, "kind": self.kind.name, "message": self.message}


OperationState = Union[Idle, InFlight, Succeeded, Failed, NeedsElevation]
