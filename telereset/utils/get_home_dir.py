"""Utility to discover the telereset home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get telereset home directory based on TELERESET_HOME or default to ~/.telereset."""
    home_env = os.environ.get("TELERESET_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".telereset"
