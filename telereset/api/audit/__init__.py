"""Audit trail: the user-facing record of what the client observed."""

from .AuditLog import CLEARED_MESSAGE, DEFAULT_CAPACITY, AuditLog
from .AuditLogEntry import AuditLogEntry
from .Severity import Severity

__all__ = ["CLEARED_MESSAGE", "DEFAULT_CAPACITY", "AuditLog", "AuditLogEntry", "Severity"]
