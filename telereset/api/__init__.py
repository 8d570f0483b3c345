"""API module for telereset.

Command functions (``cmd_*``) return a StageResult and are the single source
of truth for the CLI.
"""

__all__ = []
