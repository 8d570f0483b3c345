"""Shared body of the operation commands."""

import asyncio
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import httpx

from ..config.ClientConfig import ClientConfig
from ..config.load_client_config import load_client_config
from ..gateway.OperationKind import OperationKind
from ..orchestrator.ElevationResult import ElevationResult
from ..orchestrator.OperationState import Failed, NeedsElevation, OperationState, Succeeded
from ..orchestrator.ask_confirmer import Confirmer, ask_confirmer
from ..orchestrator.describe_success import describe_success
from ..StageResult import StageResult
from .ClientSession import ClientSession


@dataclass(frozen=True)
class _Run:
    started: bool
    state: OperationState
    elevation: ElevationResult | None
    retry_kind: OperationKind | None
    status: dict[str, Any]
    audit: list[dict[str, Any]]


async def _drive(
    session: ClientSession,
    kind: OperationKind,
    payload: dict[str, Any] | None,
    confirm_elevation: Confirmer | None,
) -> _Run:
    await session.initialize()
    started = await session.start(kind, payload) is not None

    elevation = None
    pending = session.state
    if isinstance(pending, NeedsElevation) and confirm_elevation is not None:
        prompt = pending.message or f"The {kind.label} needs administrator privileges."
        approved = await ask_confirmer(confirm_elevation, f"{prompt} Request elevation?")
        elevation = await session.confirm_elevation(approved)

    await session.orchestrator.drain()
    return _Run(
        started=started,
        state=session.state,
        elevation=elevation,
        retry_kind=session.retry_intent,
        status=session.status.to_dict(),
        audit=session.audit.to_list(),
    )


async def _run_session(
    config: ClientConfig,
    kind: OperationKind,
    payload: dict[str, Any] | None,
    confirm: Confirmer | None,
    confirm_elevation: Confirmer | None,
    transport: httpx.AsyncBaseTransport | None,
) -> _Run:
    async with ClientSession(config, confirm=confirm, transport=transport) as session:
        return await _drive(session, kind, payload, confirm_elevation)


def _summarize(kind: OperationKind, run: _Run) -> tuple[str, list[str], list[str], bool]:
    """Result line, errors, warnings and success flag for a finished run."""
    state = run.state
    if run.elevation is not None:
        elevation = run.elevation
        if isinstance(state, Failed):
            return f"Privilege elevation failed: {state.message}", [state.message], [], False
        if not elevation.approved:
            return f"Elevation declined; {kind.label} abandoned", [], [elevation.message], False
        if elevation.needs_restart:
            return elevation.message, [], [f"The {kind.label} was not performed"], False
        return elevation.message, [], [f"Retry the {kind.label} to complete it"], False

    if not run.started:
        return f"{kind.label.capitalize()} cancelled", [], [f"{kind.label.capitalize()} was not started"], False
    if isinstance(state, Succeeded):
        return describe_success(kind, state.result), [], [], True
    if isinstance(state, NeedsElevation):
        return f"{kind.label.capitalize()} needs elevation", [], [state.message or "Administrator privileges required"], False
    if isinstance(state, Failed):
        return f"{kind.label.capitalize()} failed", [state.message], [], False
    return f"{kind.label.capitalize()} ended in state {state.tag.value}", [], [], False


def _operation_stage(
    kind: OperationKind,
    announce: str,
    *,
    payload: dict[str, Any] | None = None,
    confirm: Confirmer | None = None,
    confirm_elevation: Confirmer | None = None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = load_client_config(base_url)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Configuration is invalid"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "backend_url": base_url or "",
                "kind": kind.name,
                "started": False,
                "outcome": None,
                "elevation": None,
                "retry_kind": None,
                "status": {},
                "state": {"tag": "idle"},
                "audit": [],
            }
            result_obj.success = False
            return

        yield (0.3, f"Running {kind.label} against {config.backend.base_url}...")
        run = asyncio.run(_run_session(config, kind, payload, confirm, confirm_elevation, transport))

        yield (1.0, "Complete")
        result_text, errors, warnings, success = _summarize(kind, run)
        state = run.state
        result_obj.result = result_text
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "backend_url": config.backend.base_url,
            "kind": kind.name,
            "started": run.started,
            "outcome": state.result.to_dict() if isinstance(state, Succeeded) else None,
            "elevation": run.elevation.to_dict() if run.elevation is not None else None,
            "retry_kind": run.retry_kind.name if run.retry_kind is not None else None,
            "status": run.status,
            "state": state.to_dict(),
            "audit": run.audit,
        }
        result_obj.success = success

    return StageResult(announce=announce, progress_callback=do_work)
