"""Authoritative view of remote state held by the synchronizer."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .ConfigSnapshot import ConfigSnapshot
from .SystemInfo import SystemInfo


@dataclass(frozen=True)
class RemoteStatus:
    """Last confirmed remote reads.

    Replaced wholesale on every merge; never mutated in place.
    """

    process_running: bool | None = None
    """Whether the editor process was running at the last read, None before the first read."""

    config_snapshot: ConfigSnapshot | None = None
    """Identifiers from the last configuration read, None if unknown or absent."""

    system_info: SystemInfo | None = None
    """Backend host information, None before the first read."""

    last_synced_at: datetime | None = None
    """Start time of the newest read merged so far."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "process_running": self.process_running,
            "config": self.config_snapshot.to_dict() if self.config_snapshot else None,
            "system_info": self.system_info.to_dict() if self.system_info else None,
            "last_synced_at": self.last_synced_at.isoformat() if self.last_synced_at else None,
        }
