from __future__ import annotations

from datetime import datetime, time, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def to_iso_timestamp(value: datetime) -> str:
    """Format as `2024-01-10T08:20:00.000Z` (UTC, millisecond precision)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    """Parse a stored ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing `Z`; naive values are taken as UTC.
    """
    s = value.strip()
    if s.endswith("Z") or s.endswith("z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def format_hhmm(value: datetime) -> str:
    return value.strftime("%H:%M")


def format_overtime(minutes: int) -> str:
    """45 -> '0h45', 135 -> '2h15'."""
    return f"{minutes // 60}h{minutes % 60:02d}"
