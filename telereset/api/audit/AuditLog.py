"""Bounded, ordered audit trail."""

import logging
from collections import deque
from collections.abc import Callable

from ...utils.get_logger import get_logger
from ...utils.now_utc import now_utc
from .AuditLogEntry import AuditLogEntry
from .Severity import Severity

DEFAULT_CAPACITY = 100
CLEARED_MESSAGE = "Log cleared by user"

_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: logging.INFO,
    Severity.ERROR: logging.ERROR,
}


class AuditLog:
    """Append-only audit trail with FIFO eviction.

    Entries are stamped when appended, so the order of the trail is the order
    in which events were observed, not the order in which requests were issued.
    Every entry is mirrored to the ``telereset.audit`` logger.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, on_append: Callable[[AuditLogEntry], None] | None = None):
        if capacity < 1:
            raise ValueError(f"audit capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: deque[AuditLogEntry] = deque(maxlen=capacity)
        self._on_append = on_append
        self._logger = get_logger("audit")

    def append(self, message: str, severity: Severity = Severity.INFO) -> AuditLogEntry:
        entry = AuditLogEntry(timestamp=now_utc(), message=message, severity=severity)
        self._entries.append(entry)
        self._logger.log(_LOG_LEVELS[severity], message)
        if self._on_append is not None:
            self._on_append(entry)
        return entry

    def info(self, message: str) -> AuditLogEntry:
        return self.append(message, Severity.INFO)

    def success(self, message: str) -> AuditLogEntry:
        return self.append(message, Severity.SUCCESS)

    def error(self, message: str) -> AuditLogEntry:
        return self.append(message, Severity.ERROR)

    def clear(self) -> AuditLogEntry:
        """Reset the trail to a single synthetic "cleared" entry and return it."""
        self._entries.clear()
        return self.append(CLEARED_MESSAGE, Severity.INFO)

    @property
    def entries(self) -> tuple[AuditLogEntry, ...]:
        return tuple(self._entries)

    def to_list(self) -> list[dict]:
        return [entry.to_dict() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
