"""Package version lookup."""

from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Return the installed telereset version, or "unknown" when not installed."""
    try:
        return version("telereset")
    except PackageNotFoundError:
        return "unknown"
