"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """What the command runner needs from a display."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce a command before it does any work."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print the command's output document.

        Args:
            data: JSON-serializable output dict
            kwargs: ``format`` is "yaml" (default) or "json"
        """
