"""Synchronous publish/subscribe hub for core events."""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

from ...utils.get_logger import get_logger
from .ClientEvent import ClientEvent

Handler = Callable[[Any], None]

logger = get_logger("events")


class EventBus:
    """Dispatches core events to subscribers in subscription order.

    Handlers run inline on the event loop thread. A handler that raises is
    logged and skipped so a broken view cannot corrupt a state transition that
    has already been recorded.
    """

    def __init__(self) -> None:
        self._handlers: dict[ClientEvent, list[Handler]] = defaultdict(list)

    def subscribe(self, event: ClientEvent, handler: Handler) -> Callable[[], None]:
        """Register a handler and return a callable that unregisters it."""
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[event]:
                self._handlers[event].remove(handler)

        return unsubscribe

    def publish(self, event: ClientEvent, payload: Any) -> None:
        for handler in list(self._handlers[event]):
            try:
                handler(payload)
            except Exception:
                logger.exception("Handler %r failed for %s", handler, event.value)
