"""Client session and the commands that drive it."""

from .ClientSession import ClientSession
from .watch_session import watch_session

__all__ = ["ClientSession", "watch_session"]
