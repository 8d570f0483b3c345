"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display
from .display_context import display_context

__all__ = ["CLIDisplay", "Display", "display_context"]
