"""Status command - initial load of remote state."""

import asyncio
from collections.abc import Iterator
from typing import Any

import httpx

from ..config.ClientConfig import ClientConfig
from ..config.load_client_config import load_client_config
from ..StageResult import StageResult
from .ClientSession import ClientSession


async def _load(config: ClientConfig, transport: httpx.AsyncBaseTransport | None) -> dict[str, Any]:
    async with ClientSession(config, transport=transport) as session:
        healthy = await session.check_health()
        loaded = await session.initialize()
        return {
            "healthy": healthy,
            "loaded": loaded,
            "status": session.status.to_dict(),
            "state": session.state.to_dict(),
            "audit": session.audit.to_list(),
        }


def cmd_status(
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Read backend health, system information, editor process status and configuration."""

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
                "healthy": False,
                "status": {},
                "state": {"tag": "idle"},
                "audit": [],
            }
            result_obj.success = False
            return

        yield (0.3, f"Querying {config.backend.base_url}...")
        loaded = asyncio.run(_load(config, transport))

        yield (1.0, "Complete")
        errors = [entry["message"] for entry in loaded["audit"] if entry["severity"] == "error"]
        warnings = [] if loaded["healthy"] else [f"Backend at {config.backend.base_url} did not answer its health check"]
        running = loaded["status"]["process_running"]
        if loaded["loaded"]:
            result_obj.result = "Editor is running" if running else "Editor is not running"
        else:
            result_obj.result = "Remote status incomplete"
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "backend_url": config.backend.base_url,
            "healthy": loaded["healthy"],
            "status": loaded["status"],
            "state": loaded["state"],
            "audit": loaded["audit"],
        }
        result_obj.success = loaded["loaded"]

    return StageResult(announce="Checking remote status...", progress_callback=do_work)
