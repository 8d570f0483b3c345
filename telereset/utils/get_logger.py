import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ``telereset`` namespace.

    Configuration is explicit at the CLI entry point; library use only inherits
    whatever handlers the host application installed.
    """
    return logging.getLogger(f"telereset.{name}")
