"""Operation orchestrator: runs user operations through the single operation slot."""

import asyncio
from typing import TYPE_CHECKING, Any

from ...utils.get_logger import get_logger
from ...utils.now_utc import now_utc
from ..audit.AuditLog import AuditLog
from ..gateway.GatewayError import ErrorKind, GatewayError
from ..gateway.OperationKind import OperationKind
from ..status.StatusSynchronizer import StatusSynchronizer
from .ask_confirmer import Confirmer, ask_confirmer
from .describe_success import describe_success
from .OperationContext import OperationContext
from .OperationEvent import OperationEvent
from .OperationState import Failed, InFlight, NeedsElevation, OperationState, Succeeded

if TYPE_CHECKING:
    from ..gateway.Gateway import Gateway

RUNNING_PROMPT = "The editor is currently running. It will be closed before the configuration is reset. Continue?"
AUTO_UPDATE_PROMPT = (
    "Disable the editor's auto-update? Future updates will have to be downloaded and installed manually."
)

logger = get_logger("orchestrator")


class Orchestrator:
    """Starts operations, sequences their pre-flight checks and records outcomes.

    At most one operation occupies the slot at a time. A start while another
    operation is in flight, awaiting elevation, or still in its pre-flight
    checks is ignored: it returns None and makes no backend call.
    """

    def __init__(
        self,
        gateway: "Gateway",
        synchronizer: StatusSynchronizer,
        audit: AuditLog,
        context: OperationContext,
        confirm: Confirmer | None = None,
    ):
        self.gateway = gateway
        self.synchronizer = synchronizer
        self.audit = audit
        self.context = context
        self.confirm = confirm
        self._resync_tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> OperationState:
        return self.context.state

    async def start(self, kind: OperationKind, payload: dict[str, Any] | None = None) -> OperationState | None:
        """Run one operation to a terminal state (or to ``NeedsElevation``).

        Returns:
            The state the operation ended in, or None if it was not started
            (slot busy, or the user declined a confirmation)
        """
        if not self.context.reserve(kind):
            logger.debug("Ignoring start(%s): operation slot busy (%s)", kind.name, self.context.state.tag.value)
            return None

        try:
            proceed = await self._preflight(kind)
        except BaseException:
            self.context.release()
            raise
        if not proceed:
            self.context.release()
            return None

        self.context.apply(OperationEvent.START, InFlight(kind=kind, started_at=now_utc()))
        try:
            outcome = await self.gateway.invoke(kind, payload)
        except GatewayError as exc:
            return self._fail(kind, exc.kind, exc.message)
        except Exception as exc:
            # Leave the slot startable before letting the error propagate.
            self._fail(kind, ErrorKind.APPLICATION_ERROR, f"Unexpected error: {exc!r}")
            raise

        if outcome.needs_elevation:
            logger.info("%s needs elevation: %s", kind.label, outcome.elevation_message)
            return self.context.apply(
                OperationEvent.GATEWAY_NEEDS_ELEVATION,
                NeedsElevation(kind=kind, message=outcome.elevation_message),
            )

        def record() -> None:
            self._schedule_resync(kind)
            self.audit.success(describe_success(kind, outcome))

        return self.context.apply(OperationEvent.GATEWAY_SUCCESS, Succeeded(kind=kind, result=outcome), after=record)

    async def drain(self) -> None:
        """Wait for every resync scheduled by a successful operation."""
        while self._resync_tasks:
            await asyncio.gather(*list(self._resync_tasks))

    def _fail(self, kind: OperationKind, error_kind: ErrorKind, message: str) -> OperationState:
        logger.warning("%s failed (%s): %s", kind.label, error_kind.value, message)

        def record() -> None:
            self.audit.error(f"{kind.label.capitalize()} failed: {message}")

        return self.context.apply(
            OperationEvent.GATEWAY_ERROR,
            Failed(kind=kind, error_kind=error_kind, message=message),
            after=record,
        )

    def _schedule_resync(self, kind: OperationKind) -> None:
        task = asyncio.create_task(self.synchronizer.sync_all(), name=f"telereset-resync-{kind.name.lower()}")
        self._resync_tasks.add(task)
        task.add_done_callback(self._resync_tasks.discard)

    async def _preflight(self, kind: OperationKind) -> bool:
        if kind is OperationKind.RESET:
            # Writing while the editor holds storage.json open can corrupt it.
            await self.synchronizer.sync_status_only()
            if self.synchronizer.status.process_running and not await ask_confirmer(self.confirm, RUNNING_PROMPT):
                self.audit.info("Configuration reset cancelled: the editor is still running")
                return False
        elif kind is OperationKind.DISABLE_AUTO_UPDATE:
            if not await ask_confirmer(self.confirm, AUTO_UPDATE_PROMPT):
                self.audit.info("Disable auto-update cancelled")
                return False
        return True

