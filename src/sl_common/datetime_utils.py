"""UTC datetime utilities and HH:MM parsing for rate windows."""

from datetime import datetime, time, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def parse_hhmm(value: str) -> time:
    """Parse 'HH:MM' (seconds, if present, are ignored): '18:30:00' -> time(18, 30)."""
    hours, minutes = value.strip()[:5].split(":")
    return time(int(hours), int(minutes))
