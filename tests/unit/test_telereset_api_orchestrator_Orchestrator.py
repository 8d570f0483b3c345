"""Unit tests for telereset.api.orchestrator.Orchestrator."""

import asyncio

import pytest

from telereset.api.audit.Severity import Severity
from telereset.api.events.ClientEvent import ClientEvent
from telereset.api.gateway.GatewayError import ApplicationError, ErrorKind, TimedOutError, UnreachableError
from telereset.api.gateway.OperationKind import OperationKind
from telereset.api.gateway.OperationOutcome import OperationOutcome
from telereset.api.gateway.QueryKind import QueryKind
from telereset.api.orchestrator.OperationState import (
    Failed,
    Idle,
    InFlight,
    NeedsElevation,
    StateTag,
    Succeeded,
)
from tests.unit.conftest import Core, Gate, snapshot

pytestmark = pytest.mark.orchestrator

NEEDS_ELEVATION = OperationOutcome(success=False, needs_elevation=True, elevation_message="Admin required")


class TestMutualExclusion:
    @pytest.mark.asyncio
    async def test_start_while_in_flight_is_a_noop(self, gateway):
        gate = Gate(OperationOutcome(success=True))
        gateway.on_invoke(OperationKind.KILL_PROCESS, gate)
        core = Core(gateway)

        first = asyncio.create_task(core.orchestrator.start(OperationKind.KILL_PROCESS))
        await gate.entered.wait()
        in_flight = core.context.state
        assert isinstance(in_flight, InFlight)

        assert await core.orchestrator.start(OperationKind.GENERATE_PREVIEW) is None
        assert await core.orchestrator.start(OperationKind.KILL_PROCESS) is None
        assert core.context.state is in_flight
        assert [kind for kind, _ in gateway.invocations] == [OperationKind.KILL_PROCESS]

        gate.open()
        assert isinstance(await first, Succeeded)
        await core.orchestrator.drain()

    @pytest.mark.asyncio
    async def test_concurrent_starts_never_overlap(self, gateway):
        gates = [Gate(OperationOutcome(success=True)) for _ in range(3)]
        gateway.on_invoke(OperationKind.KILL_PROCESS, *gates)
        core = Core(gateway)
        in_flight_now = 0
        peak = 0

        def track(state):
            nonlocal in_flight_now, peak
            in_flight_now = 1 if state.tag is StateTag.IN_FLIGHT else 0
            peak = max(peak, in_flight_now)

        core.events.subscribe(ClientEvent.OPERATION_STATE_CHANGED, track)
        results = asyncio.gather(*(core.orchestrator.start(OperationKind.KILL_PROCESS) for _ in range(5)))
        await gates[0].entered.wait()
        gates[0].open()
        outcomes = await results

        assert peak == 1
        assert sum(1 for outcome in outcomes if outcome is not None) == 1
        assert len(gateway.invocations) == 1
        await core.orchestrator.drain()

    @pytest.mark.asyncio
    async def test_start_during_preflight_is_a_noop(self, gateway):
        gate = Gate(False)
        gateway.on_query(QueryKind.PROCESS_STATUS, gate)
        core = Core(gateway)

        first = asyncio.create_task(core.orchestrator.start(OperationKind.RESET))
        await gate.entered.wait()
        assert isinstance(core.context.state, Idle)
        assert core.context.reserved is OperationKind.RESET

        assert await core.orchestrator.start(OperationKind.KILL_PROCESS) is None
        gate.open()
        assert isinstance(await first, Succeeded)
        assert [kind for kind, _ in gateway.invocations] == [OperationKind.RESET]
        await core.orchestrator.drain()

    @pytest.mark.asyncio
    async def test_start_while_needs_elevation_is_a_noop(self, gateway):
        gateway.on_invoke(OperationKind.RESET, NEEDS_ELEVATION)
        core = Core(gateway)
        await core.orchestrator.start(OperationKind.RESET)
        pending = core.context.state

        assert await core.orchestrator.start(OperationKind.KILL_PROCESS) is None
        assert core.context.state is pending
        assert len(gateway.invocations) == 1

    @pytest.mark.asyncio
    async def test_terminal_states_accept_a_new_start(self, gateway):
        gateway.on_invoke(OperationKind.KILL_PROCESS, UnreachableError("down"), OperationOutcome(success=True))
        core = Core(gateway)
        assert isinstance(await core.orchestrator.start(OperationKind.KILL_PROCESS), Failed)
        assert isinstance(await core.orchestrator.start(OperationKind.KILL_PROCESS), Succeeded)
        assert isinstance(await core.orchestrator.start(OperationKind.GENERATE_PREVIEW), Succeeded)
        await core.orchestrator.drain()


class TestSuccess:
    @pytest.mark.asyncio
    async def test_exactly_one_resync_per_success(self, gateway):
        core = Core(gateway)
        scheduled_at_notification = []

        def on_state(state):
            if state.tag is StateTag.SUCCEEDED:
                scheduled_at_notification.append(len(core.orchestrator._resync_tasks))

        core.events.subscribe(ClientEvent.OPERATION_STATE_CHANGED, on_state)
        state = await core.orchestrator.start(OperationKind.KILL_PROCESS)
        await core.orchestrator.drain()

        assert isinstance(state, Succeeded)
        assert scheduled_at_notification == [1]
        assert gateway.count(QueryKind.CONFIG) == 1
        assert gateway.count(QueryKind.PROCESS_STATUS) == 1
        assert core.synchronizer.status.config_snapshot == snapshot()

    @pytest.mark.asyncio
    async def test_success_appends_one_entry(self, gateway):
        gateway.on_invoke(
            OperationKind.RESET,
            OperationOutcome(success=True, snapshot=snapshot("f" * 64), registry_modified=True),
        )
        core = Core(gateway)
        await core.orchestrator.start(OperationKind.RESET, {"setReadOnly": True})
        await core.orchestrator.drain()

        (entry,) = core.audit.entries
        assert entry.severity is Severity.SUCCESS
        assert "ffffffffffffffff" in entry.message
        assert "registry" in entry.message
        assert gateway.invocations == [(OperationKind.RESET, {"setReadOnly": True})]

    @pytest.mark.asyncio
    async def test_disable_autoupdate_reports_step_count(self, gateway):
        gateway.on_invoke(OperationKind.DISABLE_AUTO_UPDATE, OperationOutcome(success=True, operations=("a", "b")))
        core = Core(gateway)
        core.orchestrator.confirm = lambda message: True
        state = await core.orchestrator.start(OperationKind.DISABLE_AUTO_UPDATE)
        await core.orchestrator.drain()
        assert state.result.operations == ("a", "b")
        assert core.messages()[-1] == "Auto-update disabled (2 steps)"


class TestFailure:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error, kind",
        [
            (UnreachableError("Backend unreachable"), ErrorKind.UNREACHABLE),
            (TimedOutError("timed out"), ErrorKind.TIMED_OUT),
            (ApplicationError("Failed to close Cursor processes"), ErrorKind.APPLICATION_ERROR),
        ],
    )
    async def test_gateway_error_fails_with_one_entry_and_no_resync(self, gateway, error, kind):
        gateway.on_invoke(OperationKind.KILL_PROCESS, error)
        core = Core(gateway)
        state = await core.orchestrator.start(OperationKind.KILL_PROCESS)
        await core.orchestrator.drain()

        assert state == Failed(kind=OperationKind.KILL_PROCESS, error_kind=kind, message=error.message)
        (entry,) = core.audit.entries
        assert entry.severity is Severity.ERROR
        assert entry.message == f"Close editor failed: {error.message}"
        assert gateway.queries == []

    @pytest.mark.asyncio
    async def test_unexpected_error_fails_the_slot_and_propagates(self, gateway):
        gateway.on_invoke(OperationKind.KILL_PROCESS, RuntimeError("decoder blew up"))
        core = Core(gateway)

        with pytest.raises(RuntimeError, match="decoder blew up"):
            await core.orchestrator.start(OperationKind.KILL_PROCESS)

        state = core.context.state
        assert isinstance(state, Failed)
        assert state.kind is OperationKind.KILL_PROCESS
        assert state.error_kind is ErrorKind.APPLICATION_ERROR
        assert "decoder blew up" in state.message
        (entry,) = core.audit.entries
        assert entry.severity is Severity.ERROR

        assert isinstance(await core.orchestrator.start(OperationKind.GENERATE_PREVIEW), Succeeded)
        await core.orchestrator.drain()


class TestNeedsElevation:
    @pytest.mark.asyncio
    async def test_reset_needing_elevation(self, gateway):
        gateway.on_invoke(OperationKind.RESET, NEEDS_ELEVATION)
        core = Core(gateway)

        state = await core.orchestrator.start(OperationKind.RESET)
        await core.orchestrator.drain()

        assert state == NeedsElevation(kind=OperationKind.RESET, message="Admin required")
        assert core.context.state == state
        assert len(core.audit) == 0
        # Only the pre-flight process check; no resync.
        assert gateway.queries == [QueryKind.PROCESS_STATUS]


class TestConfirmationGates:
    @pytest.mark.asyncio
    async def test_running_editor_without_confirmation_blocks_reset(self, gateway):
        gateway.on_query(QueryKind.PROCESS_STATUS, True)
        core = Core(gateway)
        seen = []
        core.events.subscribe(ClientEvent.OPERATION_STATE_CHANGED, seen.append)

        assert await core.orchestrator.start(OperationKind.RESET) is None

        assert gateway.invocations == []
        assert seen == []
        assert isinstance(core.context.state, Idle)
        assert not core.context.busy
        (entry,) = core.audit.entries
        assert entry.severity is Severity.INFO

    @pytest.mark.asyncio
    async def test_declined_confirmation_blocks_reset(self, gateway):
        gateway.on_query(QueryKind.PROCESS_STATUS, True)
        prompts = []
        core = Core(gateway, confirm=lambda message: prompts.append(message) or False)

        assert await core.orchestrator.start(OperationKind.RESET) is None
        assert gateway.invocations == []
        assert "running" in prompts[0]

    @pytest.mark.asyncio
    async def test_async_confirmation_allows_reset(self, gateway):
        gateway.on_query(QueryKind.PROCESS_STATUS, True)

        async def confirm(message):
            return True

        core = Core(gateway, confirm=confirm)
        assert isinstance(await core.orchestrator.start(OperationKind.RESET), Succeeded)
        assert len(gateway.invocations) == 1
        await core.orchestrator.drain()

    @pytest.mark.asyncio
    async def test_stopped_editor_needs_no_confirmation(self, gateway):
        prompts = []
        core = Core(gateway, confirm=prompts.append)
        assert isinstance(await core.orchestrator.start(OperationKind.RESET), Succeeded)
        assert prompts == []
        await core.orchestrator.drain()

    @pytest.mark.asyncio
    async def test_disable_autoupdate_always_asks(self, gateway):
        core = Core(gateway)
        assert await core.orchestrator.start(OperationKind.DISABLE_AUTO_UPDATE) is None
        assert gateway.invocations == []
        assert core.messages() == ["Disable auto-update cancelled"]

    @pytest.mark.asyncio
    async def test_failing_confirmer_releases_slot(self, gateway):
        gateway.on_query(QueryKind.PROCESS_STATUS, True)

        def confirm(message):
            raise RuntimeError("prompt closed")

        core = Core(gateway, confirm=confirm)
        with pytest.raises(RuntimeError, match="prompt closed"):
            await core.orchestrator.start(OperationKind.RESET)
        assert not core.context.busy
