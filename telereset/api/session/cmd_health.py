"""Health command."""

import asyncio
from collections.abc import Iterator

import httpx

from ..config.ClientConfig import ClientConfig
from ..config.load_client_config import load_client_config
from ..StageResult import StageResult
from .ClientSession import ClientSession


async def _check(config: ClientConfig, transport: httpx.AsyncBaseTransport | None) -> tuple[bool, dict, list[dict]]:
    async with ClientSession(config, transport=transport) as session:
        healthy = await session.check_health()
        return healthy, session.state.to_dict(), session.audit.to_list()


def cmd_health(
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Check that the backend answers ``GET /api/health``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
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
                "state": {"tag": "idle"},
                "audit": [],
            }
            result_obj.success = False
            return

        yield (0.5, f"Contacting {config.backend.base_url}...")
        healthy, state, audit = asyncio.run(_check(config, transport))

        yield (1.0, "Complete")
        url = config.backend.base_url
        result_obj.result = f"Backend at {url} is healthy" if healthy else f"Backend at {url} is not responding"
        result_obj.output = {
            "errors": [] if healthy else [f"Backend at {url} is not responding"],
            "warnings": [],
            "backend_url": url,
            "healthy": healthy,
            "state": state,
            "audit": audit,
        }
        result_obj.success = healthy

    return StageResult(announce="Checking backend health...", progress_callback=do_work)
