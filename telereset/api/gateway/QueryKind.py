"""Read-only backend queries."""

from enum import Enum


class QueryKind(str, Enum):
    """Read-only queries, valued by their backend endpoint."""

    SYSTEM_INFO = "/api/system-info"
    CONFIG = "/api/config"
    PROCESS_STATUS = "/api/check-cursor"
    HEALTH = "/api/health"
