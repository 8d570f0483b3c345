"""One client session: the core components wired around a single backend connection."""

import asyncio
from typing import Any

import httpx

from ...utils.get_logger import get_logger
from ..audit.AuditLog import AuditLog
from ..audit.AuditLogEntry import AuditLogEntry
from ..config.ClientConfig import ClientConfig
from ..events.ClientEvent import ClientEvent
from ..events.EventBus import EventBus
from ..gateway.Gateway import Gateway
from ..gateway.OperationKind import OperationKind
from ..orchestrator.ElevationFlow import ElevationFlow
from ..orchestrator.ElevationResult import ElevationResult
from ..orchestrator.OperationContext import OperationContext
from ..orchestrator.OperationState import OperationState
from ..orchestrator.ask_confirmer import Confirmer
from ..orchestrator.Orchestrator import Orchestrator
from ..status.RemoteStatus import RemoteStatus
from ..status.StatusSynchronizer import StatusSynchronizer

logger = get_logger("session")


class ClientSession:
    """Owns the operation slot, the remote status and the audit trail of one client.

    Presentation code talks to the session only: it calls ``start``,
    ``confirm_elevation`` and ``clear_audit`` and subscribes to ``events``.

    Example:
        async with ClientSession(ClientConfig.load(), confirm=ask_user) as session:
            await session.initialize()
            await session.start(OperationKind.RESET, {"setReadOnly": True})
    """

    def __init__(
        self,
        config: ClientConfig,
        confirm: Confirmer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.events = EventBus()
        self.audit = AuditLog(
            capacity=config.log.audit_capacity,
            on_append=self._publish_audit,
        )
        self.gateway = Gateway(config.backend, transport=transport)
        self.synchronizer = StatusSynchronizer(
            self.gateway,
            self.audit,
            events=self.events,
            poll_interval_secs=config.sync.poll_interval_secs,
        )
        self.context = OperationContext(events=self.events)
        self.orchestrator = Orchestrator(self.gateway, self.synchronizer, self.audit, self.context, confirm=confirm)
        self.elevation = ElevationFlow(self.gateway, self.synchronizer, self.audit, self.context)

    async def __aenter__(self) -> "ClientSession":
        await self.gateway.__aenter__()
        logger.info("Session opened against %s", self.config.backend.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            await self.synchronizer.stop_polling()
            await self.orchestrator.drain()
        finally:
            await self.gateway.__aexit__(exc_type, exc_val, exc_tb)
            logger.info("Session closed")
        return False

    @property
    def state(self) -> OperationState:
        return self.context.state

    @property
    def status(self) -> RemoteStatus:
        return self.synchronizer.status

    @property
    def retry_intent(self) -> OperationKind | None:
        return self.context.retry_intent

    async def initialize(self) -> bool:
        """Initial load: system information, process status and configuration in parallel.

        Returns:
            True if every read succeeded
        """
        self.audit.info("Loading system information...")
        results = await asyncio.gather(self.synchronizer.sync_system_info(), self.synchronizer.sync_all())
        if all(results):
            self.audit.success("Initial data loaded")
            return True
        return False

    async def start(self, kind: OperationKind, payload: dict[str, Any] | None = None) -> OperationState | None:
        return await self.orchestrator.start(kind, payload)

    async def confirm_elevation(self, approved: bool) -> ElevationResult:
        return await self.elevation.resolve(approved)

    def clear_audit(self) -> AuditLogEntry:
        """Clear the audit trail on behalf of the user; subscribers receive the "cleared" entry."""
        return self.audit.clear()

    async def check_health(self) -> bool:
        return await self.synchronizer.check_health()

    def start_polling(self) -> None:
        self.synchronizer.start_polling()

    async def stop_polling(self) -> None:
        await self.synchronizer.stop_polling()

    def _publish_audit(self, entry: AuditLogEntry) -> None:
        self.events.publish(ClientEvent.AUDIT_LOG_APPENDED, entry)
