"""Events the core emits towards the presentation layer."""

from enum import Enum


class ClientEvent(str, Enum):
    """Event names on the presentation boundary."""

    OPERATION_STATE_CHANGED = "operation-state-changed"
    STATUS_CHANGED = "status-changed"
    AUDIT_LOG_APPENDED = "audit-log-appended"
