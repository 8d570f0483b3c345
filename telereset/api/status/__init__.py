"""Remote status: snapshots and the synchronizer that owns them."""

from .ConfigSnapshot import ConfigSnapshot
from .RemoteStatus import RemoteStatus
from .StatusSynchronizer import StatusSynchronizer
from .SystemInfo import SystemInfo

__all__ = ["ConfigSnapshot", "RemoteStatus", "StatusSynchronizer", "SystemInfo"]
