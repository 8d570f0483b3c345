"""Mutating operations the backend exposes."""

from enum import Enum


class OperationKind(str, Enum):
    """User-triggered operations, valued by their backend endpoint."""

    RESET = "/api/reset"
    KILL_PROCESS = "/api/kill-cursor"
    DISABLE_AUTO_UPDATE = "/api/disable-autoupdate"
    GENERATE_PREVIEW = "/api/generate-ids"
    ELEVATE = "/api/elevate"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    OperationKind.RESET: "configuration reset",
    OperationKind.KILL_PROCESS: "close editor",
    OperationKind.DISABLE_AUTO_UPDATE: "disable auto-update",
    OperationKind.GENERATE_PREVIEW: "identifier preview",
    OperationKind.ELEVATE: "privilege elevation",
}
