"""Reset command."""

import httpx

from ..gateway.OperationKind import OperationKind
from ..orchestrator.ask_confirmer import Confirmer
from ..StageResult import StageResult
from ._operation_stage import _operation_stage


def cmd_reset(
    read_only: bool = False,
    confirm: Confirmer | None = None,
    confirm_elevation: Confirmer | None = None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Reset the editor's telemetry identifiers.

    Args:
        read_only: Mark the rewritten storage file read-only
        confirm: Asked before resetting while the editor is running; None declines
        confirm_elevation: Asked when the backend lacks privileges; None leaves the reset waiting
        base_url: Overrides ``backend.base_url``
        transport: httpx transport used instead of the network
    """
    return _operation_stage(
        OperationKind.RESET,
        "Resetting editor telemetry identifiers...",
        payload={"setReadOnly": read_only},
        confirm=confirm,
        confirm_elevation=confirm_elevation,
        base_url=base_url,
        transport=transport,
    )
