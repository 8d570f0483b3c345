"""Display lookup for the command runner."""

from typing import Literal

from .CLIDisplay import CLIDisplay
from .Display import Display

DisplayMode = Literal["cli"]


class _DisplayContext:
    def get_display(self, mode: DisplayMode = "cli") -> Display:
        """Build a display bound to the current stdout/stderr."""
        if mode != "cli":
            raise ValueError(f"Invalid display mode: {mode}. Must be 'cli'")
        return CLIDisplay()


display_context = _DisplayContext()
