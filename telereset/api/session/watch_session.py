"""Long-running session that polls remote status and reports changes."""

import asyncio
from collections.abc import Callable

import httpx

from ...utils.get_logger import get_logger
from ..audit.AuditLogEntry import AuditLogEntry
from ..config.ClientConfig import ClientConfig
from ..events.ClientEvent import ClientEvent
from ..status.RemoteStatus import RemoteStatus
from .ClientSession import ClientSession

logger = get_logger("watch")


async def watch_session(
    config: ClientConfig,
    on_status: Callable[[RemoteStatus], None],
    on_audit: Callable[[AuditLogEntry], None],
    duration_secs: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RemoteStatus:
    """Run the initial load, then poll until cancelled or ``duration_secs`` elapses.

    Returns:
        The last confirmed remote status
    """
    async with ClientSession(config, transport=transport) as session:
        session.events.subscribe(ClientEvent.STATUS_CHANGED, on_status)
        session.events.subscribe(ClientEvent.AUDIT_LOG_APPENDED, on_audit)
        await session.initialize()
        session.start_polling()
        logger.info("Watching %s every %.1fs", config.backend.base_url, config.sync.poll_interval_secs)
        try:
            if duration_secs is None:
                await asyncio.Event().wait()
            else:
                await asyncio.sleep(duration_secs)
        finally:
            await session.stop_polling()
        return session.status
