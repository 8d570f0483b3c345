from dataclasses import dataclass
from typing import Any

from ..gateway.OperationKind import OperationKind
from .OperationState import OperationState


@dataclass(frozen=True)
class ElevationResult:
    """How a ``NeedsElevation`` prompt was resolved."""

    approved: bool
    needs_restart: bool
    retry_kind: OperationKind | None
    message: str
    state: OperationState

    def to_dict(self) -> dict[str, Any]:
        return {
            "approved": self.approved,
            "needs_restart": self.needs_restart,
            "retry_kind": self.retry_kind.name if self.retry_kind is not None else None,
            "message": self.message,
            "state": self.state.to_dict(),
        }
