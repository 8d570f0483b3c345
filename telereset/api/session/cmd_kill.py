"""Close editor command."""

import httpx

from ..gateway.OperationKind import OperationKind
from ..orchestrator.ask_confirmer import Confirmer
from ..StageResult import StageResult
from ._operation_stage import _operation_stage


def cmd_kill(
    confirm_elevation: Confirmer | None = None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Ask the backend to terminate every editor process."""
    return _operation_stage(
        OperationKind.KILL_PROCESS,
        "Closing the editor...",
        confirm_elevation=confirm_elevation,
        base_url=base_url,
        transport=transport,
    )
