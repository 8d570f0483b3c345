"""Output schemas for session commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class _SessionOutput(BaseOutputSchema):
    backend_url: str = Field(..., description="Backend base URL the session talked to")
    state: dict[str, Any] = Field(..., description="Final operation slot state, as tagged dict")
    audit: list[dict[str, Any]] = Field(..., description="Audit entries recorded by the session, oldest first")


class SessionStatusOutput(_SessionOutput):
    """Output schema for status command.

    Output structure:
    - errors / warnings: list[str]
    - backend_url: str
    - healthy: bool - whether the health endpoint answered
    - status: dict - last confirmed remote status (process, config, system info)
    - state: dict - operation slot state (always idle for status)
    - audit: list[dict] - audit entries
    """

    healthy: bool = Field(..., description="Whether the backend answered its health endpoint")
    status: dict[str, Any] = Field(..., description="Last confirmed remote status")


class SessionHealthOutput(_SessionOutput):
    """Output schema for health command."""

    healthy: bool = Field(..., description="Whether the backend answered its health endpoint")


class SessionOperationOutput(_SessionOutput):
    """Output schema for operation commands (reset, kill, disable_autoupdate, preview, elevate).

    Output structure:
    - errors / warnings: list[str]
    - backend_url: str
    - kind: str - operation kind name
    - started: bool - False if the operation was rejected or cancelled before the backend call
    - outcome: dict | None - backend outcome of the operation, None unless it succeeded
    - elevation: dict | None - how an elevation prompt was resolved, None if none was raised or answered
    - retry_kind: str | None - operation the user may retry after in-process elevation
    - status: dict - remote status after the post-operation resync
    - state / audit
    """

    kind: str = Field(..., description="Operation kind name")
    started: bool = Field(..., description="Whether the operation reached the backend")
    outcome: dict[str, Any] | None = Field(..., description="Backend outcome, None unless succeeded")
    elevation: dict[str, Any] | None = Field(..., description="Elevation resolution, None if not prompted")
    retry_kind: str | None = Field(..., description="Operation to retry manually after elevation")
    status: dict[str, Any] = Field(..., description="Remote status after the operation")


register_output_schema("session", "status", SessionStatusOutput)
register_output_schema("session", "health", SessionHealthOutput)
for _command in ("reset", "kill", "disable_autoupdate", "preview", "elevate"):
    register_output_schema("session", _command, SessionOperationOutput)
