"""UTC timestamp helper."""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
