"""Remote operation gateway: typed single-shot calls to the backend."""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ...utils.get_logger import get_logger
from ..config.BackendConfig import BackendConfig
from ..status.ConfigSnapshot import ConfigSnapshot
from ..status.SystemInfo import SystemInfo
from ._Envelope import _Envelope
from .GatewayError import ApplicationError, MalformedResponseError, TimedOutError, UnreachableError
from .OperationKind import OperationKind
from .OperationOutcome import OperationOutcome
from .QueryKind import QueryKind

M = TypeVar("M", bound=BaseModel)

logger = get_logger("gateway")


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(x) for x in first.get("loc", ()))
    msg = first.get("msg", str(exc))
    return f"{loc}: {msg}" if loc else msg


class Gateway:
    """Translation layer between the client and the backend's JSON API.

    Every call is single-shot: no retries, no caching. Transport failures,
    contract violations and backend-reported failures are raised as distinct
    ``GatewayError`` subclasses. A privilege failure is not an error and is
    returned as an ``OperationOutcome`` with ``needs_elevation`` set.

    Use as an async context manager; the HTTP connection pool lives for the
    duration of the ``async with`` block.
    """

    def __init__(self, backend_config: BackendConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.backend_config = backend_config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "Gateway":
        self._client = httpx.AsyncClient(
            base_url=self.backend_config.base_url,
            timeout=httpx.Timeout(self.backend_config.timeout_secs),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()
        return False

    async def invoke(self, kind: OperationKind, payload: dict[str, Any] | None = None) -> OperationOutcome:
        """Issue a mutating operation.

        Args:
            kind: Operation to perform
            payload: JSON body; only ``RESET`` takes one (``{"setReadOnly": bool}``)

        Returns:
            OperationOutcome, with ``needs_elevation`` set when the backend lacks privilege

        Raises:
            UnreachableError, TimedOutError, MalformedResponseError, ApplicationError
        """
        endpoint = kind.value
        if kind is OperationKind.RESET and payload is None:
            payload = {"setReadOnly": False}
        envelope = await self._request("POST", endpoint, payload)

        if not envelope.success:
            if envelope.needs_elevation:
                return OperationOutcome(
                    success=False,
                    message=envelope.error or "",
                    needs_elevation=True,
                    elevation_message=envelope.elevation_message or envelope.error or "",
                )
            raise ApplicationError(envelope.error or f"{kind.label} failed", endpoint)

        snapshot = None
        if kind in (OperationKind.RESET, OperationKind.GENERATE_PREVIEW):
            if envelope.data is None:
                raise MalformedResponseError(f"POST {endpoint} succeeded without identifier data", endpoint)
            snapshot = self._parse(ConfigSnapshot, envelope.data, endpoint)

        return OperationOutcome(
            success=True,
            message=envelope.message or "",
            snapshot=snapshot,
            operations=tuple(envelope.operations or ()),
            registry_modified=envelope.registry_modified,
            needs_restart=envelope.needs_restart,
        )

    async def query(self, kind: QueryKind) -> Any:
        """Issue a read-only query.

        Returns:
            ``SYSTEM_INFO`` -> SystemInfo, ``CONFIG`` -> ConfigSnapshot or None when
            no configuration exists, ``PROCESS_STATUS`` -> bool, ``HEALTH`` -> bool

        Raises:
            UnreachableError, TimedOutError, MalformedResponseError, ApplicationError
        """
        endpoint = kind.value
        envelope = await self._request("GET", endpoint)
        if not envelope.success:
            raise ApplicationError(envelope.error or f"GET {endpoint} failed", endpoint)

        if kind is QueryKind.HEALTH:
            return True
        if kind is QueryKind.CONFIG:
            if envelope.data is None:
                return None
            return self._parse(ConfigSnapshot, envelope.data, endpoint)
        if kind is QueryKind.SYSTEM_INFO:
            return self._parse(SystemInfo, envelope.data, endpoint)
        # PROCESS_STATUS
        data = envelope.data
        if not isinstance(data, dict) or not isinstance(data.get("running"), bool):
            raise MalformedResponseError(f"GET {endpoint} returned no boolean 'running' field", endpoint)
        return data["running"]

    async def _request(self, method: str, endpoint: str, payload: dict[str, Any] | None = None) -> _Envelope:
        if self._client is None:
            raise RuntimeError("Gateway not opened. Use as async context manager first.")

        logger.debug("%s %s", method, endpoint)
        try:
            response = await self._client.request(method, endpoint, json=payload)
        except httpx.TimeoutException as exc:
            raise TimedOutError(
                f"{method} {endpoint} timed out after {self.backend_config.timeout_secs}s", endpoint
            ) from exc
        except httpx.DecodingError as exc:
            raise MalformedResponseError(f"{method} {endpoint} returned an undecodable body: {exc}", endpoint) from exc
        except httpx.RequestError as exc:
            raise UnreachableError(f"Backend unreachable at {self.backend_config.base_url}: {exc}", endpoint) from exc

        # Error answers (403, 500) still carry the JSON envelope.
        try:
            raw = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"{method} {endpoint} returned a non-JSON body (HTTP {response.status_code})", endpoint
            ) from exc

        try:
            return _Envelope.model_validate(raw)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"{method} {endpoint} returned an unexpected response: {_first_error(exc)}", endpoint
            ) from exc

    @staticmethod
    def _parse(model: type[M], data: Any, endpoint: str) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(f"{endpoint} returned invalid data: {_first_error(exc)}", endpoint) from exc
