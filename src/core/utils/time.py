"""
Time-related utilities for the application.

All timestamps are generated in UTC and serialized using
ISO-8601 format with timezone information. Dates read from
sidecar metadata are parsed leniently: anything that cannot be
parsed is treated as unknown rather than rejected.
"""

from datetime import datetime, timezone

from core.utils.constants import UNKNOWN_DATE_LABEL


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return datetime.now(timezone.utc).isoformat()


def parse_iso_datetime(value: str | None) -> datetime | None:
    """Parse an ISO-8601 string into an aware UTC datetime.

    Naive values are assumed to be UTC. Returns None for empty or
    unparsable input.

    Example:
        "2023-05-01T12:00:00+09:00" -> 2023-05-01 03:00:00+00:00
    """
    if not value or not isinstance(value, str):
        return None

    try:
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def sort_timestamp(value: str | None) -> float:
    """Return the POSIX timestamp used for ordering.

    Absent or unparsable dates order as the epoch.
    """
    parsed = parse_iso_datetime(value)
    return parsed.timestamp() if parsed else 0.0


def display_date(value: str | None) -> str:
    """Render a metadata date for display, or "unknown"."""
    parsed = parse_iso_datetime(value)
    return parsed.isoformat() if parsed else UNKNOWN_DATE_LABEL
