"""Elevate command."""

import httpx

from ..gateway.OperationKind import OperationKind
from ..StageResult import StageResult
from ._operation_stage import _operation_stage


def cmd_elevate(
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Ask the backend to restart itself with administrator privileges."""
    return _operation_stage(
        OperationKind.ELEVATE,
        "Requesting privilege elevation...",
        base_url=base_url,
        transport=transport,
    )
