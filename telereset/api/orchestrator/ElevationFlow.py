"""Resolution of an operation that stopped for lack of privilege."""

from typing import TYPE_CHECKING

from ...utils.get_logger import get_logger
from ...utils.now_utc import now_utc
from ..audit.AuditLog import AuditLog
from ..gateway.GatewayError import ErrorKind, GatewayError
from ..gateway.OperationKind import OperationKind
from ..status.StatusSynchronizer import StatusSynchronizer
from .ElevationResult import ElevationResult
from .InvalidTransitionError import InvalidTransitionError
from .OperationContext import OperationContext
from .OperationEvent import OperationEvent
from .OperationState import Failed, Idle, InFlight, NeedsElevation

if TYPE_CHECKING:
    from ..gateway.Gateway import Gateway

RESTART_INSTRUCTION = (
    "An elevated instance of the backend has been started. "
    "Close this client and continue in the new elevated instance."
)

logger = get_logger("elevation")


class ElevationFlow:
    """Turns the user's answer to an elevation prompt into a state transition.

    The original operation is never retried automatically. After an in-process
    elevation its kind is left in ``context.retry_intent`` so the caller can
    offer a manual retry.
    """

    def __init__(
        self,
        gateway: "Gateway",
        synchronizer: StatusSynchronizer,
        audit: AuditLog,
        context: OperationContext,
    ):
        self.gateway = gateway
        self.synchronizer = synchronizer
        self.audit = audit
        self.context = context

    @property
    def pending(self) -> NeedsElevation | None:
        state = self.context.state
        return state if isinstance(state, NeedsElevation) else None

    async def resolve(self, approved: bool) -> ElevationResult:
        """Apply the user's decision.

        Args:
            approved: True to request elevation from the backend

        Raises:
            InvalidTransitionError: If no operation is waiting for elevation
        """
        pending = self.pending
        if pending is None:
            raise InvalidTransitionError(
                f"Nothing to elevate: operation slot is {self.context.state.tag.value}"
            )
        origin = pending.kind

        if not approved:
            state = self.context.apply(
                OperationEvent.ELEVATION_DECLINED,
                Idle(),
                after=lambda: self.audit.info(f"Elevation declined; {origin.label} abandoned"),
            )
            return ElevationResult(False, False, None, "Elevation declined", state)

        self.context.apply(
            OperationEvent.ELEVATION_APPROVED,
            InFlight(kind=OperationKind.ELEVATE, started_at=now_utc()),
        )
        try:
            outcome = await self.gateway.invoke(OperationKind.ELEVATE)
        except GatewayError as exc:
            return self._fail(origin, exc.kind, exc.message)
        except Exception as exc:
            self._fail(origin, ErrorKind.APPLICATION_ERROR, f"Unexpected error: {exc!r}")
            raise
        if not outcome.success or outcome.needs_elevation:
            message = outcome.elevation_message or outcome.message or "Elevation was refused by the backend"
            return self._fail(origin, ErrorKind.APPLICATION_ERROR, message)

        if outcome.needs_restart:
            logger.info("Elevated instance spawned; abandoning %s", origin.name)
            state = self.context.apply(
                OperationEvent.ELEVATION_RESOLVED,
                Idle(),
                after=lambda: self.audit.info(f"{RESTART_INSTRUCTION} The {origin.label} was not performed."),
            )
            return ElevationResult(True, True, None, RESTART_INSTRUCTION, state)

        try:
            await self.synchronizer.sync_system_info()
        except Exception as exc:
            self._fail(origin, ErrorKind.APPLICATION_ERROR, f"Unexpected error: {exc!r}")
            raise

        def record() -> None:
            self.context.retry_intent = origin
            self.audit.success(f"Privileges elevated; {origin.label} can be retried")

        state = self.context.apply(OperationEvent.ELEVATION_RESOLVED, Idle(), after=record)
        message = outcome.message or f"Privileges elevated. Retry the {origin.label} to continue."
        return ElevationResult(True, False, origin, message, state)

    def _fail(self, origin: OperationKind, error_kind: ErrorKind, message: str) -> ElevationResult:
        logger.warning("Elevation for %s failed (%s): %s", origin.name, error_kind.value, message)
        state = self.context.apply(
            OperationEvent.GATEWAY_ERROR,
            Failed(kind=OperationKind.ELEVATE, error_kind=error_kind, message=message),
            after=lambda: self.audit.error(f"Privilege elevation failed: {message}"),
        )
        return ElevationResult(True, False, None, message, state)
