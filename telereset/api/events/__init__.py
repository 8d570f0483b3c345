"""Presentation boundary: events emitted by the core."""

from .ClientEvent import ClientEvent
from .EventBus import EventBus

__all__ = ["ClientEvent", "EventBus"]
