"""Translated answer of a mutating backend call."""

from dataclasses import dataclass, field
from typing import Any

from ..status.ConfigSnapshot import ConfigSnapshot


@dataclass(frozen=True)
class OperationOutcome:
    """Result of ``Gateway.invoke``.

    ``success`` is False only together with ``needs_elevation``; every other
    unsuccessful answer is raised as an ``ApplicationError``.
    """

    success: bool
    message: str = ""
    snapshot: ConfigSnapshot | None = None
    operations: tuple[str, ...] = field(default_factory=tuple)
    needs_elevation: bool = False
    elevation_message: str = ""
    registry_modified: bool = False
    needs_restart: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "snapshot": self.snapshot.to_dict() if self.snapshot else None,
            "operations": list(self.operations),
            "needs_elevation": self.needs_elevation,
            "elevation_message": self.elevation_message,
            "registry_modified": self.registry_modified,
            "needs_restart": self.needs_restart,
        }
