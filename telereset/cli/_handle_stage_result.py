"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._global_option import _global_option
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F, result_printer: Callable[[dict], None] | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML per ``--display``)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from telereset.cli.display.display_context import display_context

        display = display_context.get_display("cli")
        display_format = _global_option("display_format", "yaml")
        if display_format not in ("json", "yaml"):
            display_format = "yaml"
        _run_single_execution(func, args, kwargs, display, display_format, result_printer)

    return wrapper  # type: ignore[return-value]
