"""Preview identifiers command."""

import httpx

from ..gateway.OperationKind import OperationKind
from ..StageResult import StageResult
from ._operation_stage import _operation_stage


def cmd_preview(
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Generate a fresh identifier set without writing it anywhere."""
    return _operation_stage(
        OperationKind.GENERATE_PREVIEW,
        "Generating preview identifiers...",
        base_url=base_url,
        transport=transport,
    )
