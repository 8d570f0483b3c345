"""The session's single operation slot."""

from collections.abc import Callable

from ...utils.get_logger import get_logger
from ..events.ClientEvent import ClientEvent
from ..events.EventBus import EventBus
from ..gateway.OperationKind import OperationKind
from .InvalidTransitionError import InvalidTransitionError
from .OperationEvent import TRANSITIONS, OperationEvent
from .OperationState import Idle, InFlight, NeedsElevation, OperationState

logger = get_logger("orchestrator")


class OperationContext:
    """Owns the one ``OperationState`` of a client session.

    All writes go through ``apply``, which checks the transition table and
    completes the write (and its ``after`` hook) before any subscriber runs.
    ``apply`` never awaits, so no other task can interleave with a transition.

    A start is admitted in two steps: ``reserve`` claims the slot for the
    duration of the pre-flight checks, and ``apply(START, ...)`` turns the
    claim into ``InFlight``.
    """

    def __init__(self, events: EventBus | None = None):
        self.events = events
        self._state: OperationState = Idle()
        self._reserved: OperationKind | None = None
        self.retry_intent: OperationKind | None = None
        """Operation the user may retry manually after a successful in-process elevation."""

    @property
    def state(self) -> OperationState:
        return self._state

    @property
    def reserved(self) -> OperationKind | None:
        return self._reserved

    @property
    def busy(self) -> bool:
        """True while a start would be rejected."""
        return self._reserved is not None or isinstance(self._state, (InFlight, NeedsElevation))

    def reserve(self, kind: OperationKind) -> bool:
        if self.busy:
            return False
        self._reserved = kind
        return True

    def release(self) -> None:
        self._reserved = None

    def apply(
        self,
        event: OperationEvent,
        new_state: OperationState,
        after: Callable[[], None] | None = None,
    ) -> OperationState:
        """Record a transition.

        Args:
            event: Event causing the transition
            new_state: State to record; its tag must match the table's target
            after: Runs right after the write and before subscribers are notified

        Raises:
            InvalidTransitionError: If the table has no such transition
        """
        old_state = self._state
        target = TRANSITIONS.get((old_state.tag, event))
        if target is None or target is not new_state.tag:
            raise InvalidTransitionError(
                f"Illegal transition {old_state.tag.value} --{event.value}--> {new_state.tag.value}"
            )
        if event is OperationEvent.START:
            if self._reserved is None:
                raise InvalidTransitionError("START requires a reserved operation slot")
            self._reserved = None
            self.retry_intent = None

        self._state = new_state
        logger.debug("Operation state %s -> %s (%s)", old_state.tag.value, new_state.tag.value, event.value)
        if after is not None:
            after()
        if self.events is not None:
            self.events.publish(ClientEvent.OPERATION_STATE_CHANGED, new_state)
        return new_state
