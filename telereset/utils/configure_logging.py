"""Unified telereset logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home_dir: Path | None = None, level: str = "INFO") -> None:
    """Configure the ``telereset`` root logger.

    Args:
        home_dir: telereset home directory. If None, derived from TELERESET_HOME.
        level: Logging level name for the package logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home_dir is None:
        from .get_home_dir import get_home_dir

        home_dir = get_home_dir()

    home_dir.mkdir(parents=True, exist_ok=True)
    log_file = home_dir / "telereset.log"

    root_logger = logging.getLogger("telereset")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
