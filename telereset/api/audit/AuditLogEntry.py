"""Audit trail entry DTO."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .Severity import Severity


@dataclass(frozen=True)
class AuditLogEntry:
    """One user-visible audit trail line."""

    timestamp: datetime
    message: str
    severity: Severity

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "message": self.message,
            "severity": self.severity.value,
        }
