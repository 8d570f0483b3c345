"""Disable auto-update command."""

import httpx

from ..gateway.OperationKind import OperationKind
from ..orchestrator.ask_confirmer import Confirmer
from ..StageResult import StageResult
from ._operation_stage import _operation_stage


def cmd_disable_autoupdate(
    confirm: Confirmer | None = None,
    confirm_elevation: Confirmer | None = None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Disable the editor's auto-updater.

    The backend reports the steps it performed; they are returned in
    ``outcome.operations``. ``confirm`` is always asked first and None declines.
    """
    return _operation_stage(
        OperationKind.DISABLE_AUTO_UPDATE,
        "Disabling editor auto-update...",
        confirm=confirm,
        confirm_elevation=confirm_elevation,
        base_url=base_url,
        transport=transport,
    )
