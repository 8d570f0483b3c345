"""Lookup of options stored by the root callback."""

from typing import Any

import click


def _global_option(key: str, default: Any = None) -> Any:
    """Walk the active Click context chain for a value stored in ``ctx.obj``."""
    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and key in obj:
            return obj[key]
        current = current.parent
    return default
