"""Status synchronizer: pulls remote truth and merges it by request start order."""

import asyncio
import itertools
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ...utils.get_logger import get_logger
from ...utils.now_utc import now_utc
from ..audit.AuditLog import AuditLog
from ..events.ClientEvent import ClientEvent
from ..events.EventBus import EventBus
from ..gateway.GatewayError import GatewayError
from ..gateway.QueryKind import QueryKind
from .RemoteStatus import RemoteStatus

if TYPE_CHECKING:
    from ..gateway.Gateway import Gateway

logger = get_logger("status")

# RemoteStatus field -> what the audit trail calls it when a read fails
_FIELD_LABELS = {
    "process_running": "editor process status",
    "config_snapshot": "configuration",
    "system_info": "system information",
}


class StatusSynchronizer:
    """Sole owner of the session's ``RemoteStatus``.

    Every read takes a ticket from a monotonic counter when it is issued. A
    field is only overwritten by a read whose ticket is newer than the one
    that last wrote it, so a slow response can never replace data from a read
    that started later (newer start wins, not last arrival). Failed reads leave
    the held status untouched and are recorded in the audit trail.
    """

    def __init__(
        self,
        gateway: "Gateway",
        audit: AuditLog,
        events: EventBus | None = None,
        poll_interval_secs: float = 10.0,
    ):
        self.gateway = gateway
        self.audit = audit
        self.events = events
        self.poll_interval_secs = poll_interval_secs
        self._status = RemoteStatus()
        self._tickets = itertools.count(1)
        self._written_by: dict[str, int] = {name: 0 for name in _FIELD_LABELS}
        self._poll_task: asyncio.Task | None = None

    @property
    def status(self) -> RemoteStatus:
        return self._status

    def _issue(self) -> tuple[int, datetime]:
        return next(self._tickets), now_utc()

    async def sync_all(self) -> bool:
        """Refresh process status and configuration together.

        Returns:
            True if both reads succeeded (whether or not they were newer than the held data)
        """
        ticket, started_at = self._issue()
        results = await asyncio.gather(
            self.gateway.query(QueryKind.PROCESS_STATUS),
            self.gateway.query(QueryKind.CONFIG),
            return_exceptions=True,
        )
        failed = False
        for field_name, outcome in zip(("process_running", "config_snapshot"), results):
            if isinstance(outcome, GatewayError):
                self._record_failure(field_name, outcome)
                failed = True
            elif isinstance(outcome, BaseException):
                raise outcome
        if failed:
            return False

        running, snapshot = results
        self._merge(ticket, started_at, process_running=running, config_snapshot=snapshot)
        return True

    async def sync_status_only(self) -> bool:
        """Refresh only ``process_running``; used by the polling loop and pre-flight checks."""
        return await self._sync_one("process_running", QueryKind.PROCESS_STATUS)

    async def sync_system_info(self) -> bool:
        """Refresh backend host information (including the admin flag)."""
        return await self._sync_one("system_info", QueryKind.SYSTEM_INFO)

    async def check_health(self) -> bool:
        """Return True if the backend answers its health endpoint."""
        try:
            return await self.gateway.query(QueryKind.HEALTH)
        except GatewayError as exc:
            logger.debug("Health check failed: %s", exc)
            return False

    async def _sync_one(self, field_name: str, kind: QueryKind) -> bool:
        ticket, started_at = self._issue()
        try:
            value = await self.gateway.query(kind)
        except GatewayError as exc:
            self._record_failure(field_name, exc)
            return False
        self._merge(ticket, started_at, **{field_name: value})
        return True

    def _record_failure(self, field_name: str, exc: GatewayError) -> None:
        logger.warning("Read of %s failed (%s): %s", field_name, exc.kind.value, exc)
        self.audit.error(f"Failed to refresh {_FIELD_LABELS[field_name]}: {exc}")

    def _merge(self, ticket: int, started_at: datetime, **fields: Any) -> bool:
        updates = {}
        for name, value in fields.items():
            if ticket > self._written_by[name]:
                updates[name] = value
                self._written_by[name] = ticket
            else:
                logger.debug("Discarding stale %s from read #%d (held #%d)", name, ticket, self._written_by[name])
        if not updates:
            return False

        last = self._status.last_synced_at
        updates["last_synced_at"] = started_at if last is None or started_at > last else last
        self._status = replace(self._status, **updates)
        if self.events is not None:
            self.events.publish(ClientEvent.STATUS_CHANGED, self._status)
        return True

    def start_polling(self) -> None:
        """Start polling ``sync_status_only`` every ``poll_interval_secs`` on the running loop."""
        if self._poll_task is not None and not self._poll_task.done():
            return
        self._poll_task = asyncio.create_task(self._poll_loop(), name="telereset-status-poll")

    async def stop_polling(self) -> None:
        task, self._poll_task = self._poll_task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Status polling had stopped with an error")

    @property
    def polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    async def _poll_loop(self) -> None:
        while True:
            await asyncio.sleep(self.poll_interval_secs)
            try:
                await self.sync_status_only()
            except Exception as exc:
                logger.exception("Status poll failed")
                self.audit.error(f"Failed to refresh editor process status: {exc!r}")
