"""Shared pytest configuration and fixtures for all tests."""

import asyncio
import json
from collections import defaultdict
from pathlib import Path
from typing import Any

import httpx
import pytest

from telereset.api.gateway.OperationKind import OperationKind
from telereset.api.gateway.OperationOutcome import OperationOutcome
from telereset.api.gateway.QueryKind import QueryKind
from telereset.api.status.ConfigSnapshot import ConfigSnapshot
from telereset.api.status.SystemInfo import SystemInfo

BACKEND_URL = "http://backend.test"


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Backend payloads
# =============================================================================


def config_data(machine_id: str = "a" * 64) -> dict:
    """``data`` object of ``GET /api/config`` in the backend's wire format."""
    return {
        "telemetryMachineId": machine_id,
        "telemetryMacMachineId": "b" * 64,
        "telemetryDevDeviceId": "6f1c2d3e-0000-4000-8000-000000000001",
        "telemetrySqmId": "{8A4D6C2E-0000-4000-8000-000000000002}",
        "lastModified": "2024-05-01T12:00:00Z",
    }


def system_info_data(is_admin: bool = False) -> dict:
    return {"os": "linux", "username": "alice", "isAdmin": is_admin, "configPath": "/home/alice/.config/storage.json"}


def snapshot(machine_id: str = "a" * 64) -> ConfigSnapshot:
    return ConfigSnapshot.model_validate(config_data(machine_id))


def system_info(is_admin: bool = False) -> SystemInfo:
    return SystemInfo.model_validate(system_info_data(is_admin))


def minimal_config_dict() -> dict:
    """Minimal valid telereset configuration dict for testing."""
    return {
        "backend": {"base_url": BACKEND_URL, "timeout_secs": None},
        "sync": {"poll_interval_secs": 10.0},
        "log": {"level": "DEBUG", "audit_capacity": 100},
    }


# =============================================================================
# HTTP fake
# =============================================================================


class FakeBackend:
    """Routes for ``httpx.MockTransport`` answering like a healthy, unprivileged backend.

    Override a route with ``respond(endpoint, body, status)``; every request is
    recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, Any]] = {
            "/api/health": (200, {"success": True, "message": "ok"}),
            "/api/system-info": (200, {"success": True, "data": system_info_data()}),
            "/api/config": (200, {"success": True, "data": config_data()}),
            "/api/check-cursor": (200, {"success": True, "data": {"running": False}}),
            "/api/reset": (
                200,
                {
                    "success": True,
                    "message": "Configuration reset successfully.",
                    "data": config_data("c" * 64),
                    "registryModified": False,
                },
            ),
            "/api/kill-cursor": (200, {"success": True, "message": "Cursor processes closed"}),
            "/api/generate-ids": (200, {"success": True, "data": config_data("d" * 64)}),
            "/api/disable-autoupdate": (
                200,
                {"success": True, "operations": ["Removed updater directory", "Created blocking file"]},
            ),
            "/api/elevate": (200, {"success": True, "message": "Privilege elevation initiated.", "needsRestart": True}),
        }

    def respond(self, endpoint: str, body: Any, status: int = 200) -> None:
        self.routes[endpoint] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"success": False, "error": "Not found"}))
        if isinstance(body, Exception):
            raise body
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, endpoint: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.path == endpoint]


# =============================================================================
# Scripted gateway
# =============================================================================


class Gate:
    """A scripted result that is held back until ``open()`` is called."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.entered = asyncio.Event()
        self._released = asyncio.Event()

    def open(self) -> None:
        self._released.set()

    async def wait(self) -> Any:
        self.entered.set()
        await self._released.wait()
        return self.value


class ScriptedGateway:
    """In-memory stand-in for ``Gateway`` with per-kind result queues.

    Queued values may be results, exceptions (raised), or ``Gate`` objects.
    Empty queues fall back to ``defaults`` for queries and a plain success
    for operations.
    """

    def __init__(self) -> None:
        self.invocations: list[tuple[OperationKind, dict | None]] = []
        self.queries: list[QueryKind] = []
        self._invoke_results: dict[OperationKind, list[Any]] = defaultdict(list)
        self._query_results: dict[QueryKind, list[Any]] = defaultdict(list)
        self.defaults: dict[QueryKind, Any] = {
            QueryKind.PROCESS_STATUS: False,
            QueryKind.CONFIG: snapshot(),
            QueryKind.SYSTEM_INFO: system_info(),
            QueryKind.HEALTH: True,
        }

    def on_invoke(self, kind: OperationKind, *results: Any) -> None:
        self._invoke_results[kind].extend(results)

    def on_query(self, kind: QueryKind, *results: Any) -> None:
        self._query_results[kind].extend(results)

    async def invoke(self, kind: OperationKind, payload: dict | None = None) -> OperationOutcome:
        self.invocations.append((kind, payload))
        queue = self._invoke_results[kind]
        return await self._resolve(queue.pop(0) if queue else OperationOutcome(success=True))

    async def query(self, kind: QueryKind) -> Any:
        self.queries.append(kind)
        queue = self._query_results[kind]
        return await self._resolve(queue.pop(0) if queue else self.defaults[kind])

    def count(self, kind: QueryKind) -> int:
        return self.queries.count(kind)

    @staticmethod
    async def _resolve(result: Any) -> Any:
        if isinstance(result, Gate):
            result = await result.wait()
        if isinstance(result, Exception):
            raise result
        return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def telereset_home(tmp_path: Path, monkeypatch) -> Path:
    """Set up TELERESET_HOME with a minimal config file.

    Returns:
        Path to the telereset home directory (tmp_path)
    """
    monkeypatch.setenv("TELERESET_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict()))
    return tmp_path


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def gateway() -> ScriptedGateway:
    return ScriptedGateway()


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
