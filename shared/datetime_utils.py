"""
Date/time parsing and conversion utilities — framework-agnostic.

The database stores UTC. SQLite (used in tests) hands datetimes back without
tzinfo, so every read goes through ``ensure_utc`` before comparisons.

Admin forms send wall-clock values (``2026-10-25`` or ``2026-10-25T19:00``)
with no offset. Those are site-local times and are pinned to the site zone
with ``localize`` before they are stored.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return *value* as an aware UTC datetime; naive values are assumed UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def localize(value: Optional[datetime], tz_name: str) -> Optional[datetime]:
    """Aware UTC datetime for *value*; naive values are wall-clock time in *tz_name*."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=ZoneInfo(tz_name))
    return value.astimezone(timezone.utc)


def parse_wall_clock(value: Any) -> Optional[datetime]:
    """Parse a date/time value without assuming a time zone.

    Accepts:
    - ``None`` or ``""`` → ``None``
    - ``datetime`` instances, returned as they are
    - ``date`` instances → midnight, naive
    - ``str`` ending in ``"Z"`` → converted to ``+00:00`` before parsing
    - Any ISO 8601 date (``YYYY-MM-DD``) or datetime string

    Values that carry an offset come back aware; everything else stays naive.

    Raises:
        ValueError: if *value* cannot be parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raw = str(value).strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return datetime.fromisoformat(raw)


def local_date(moment: datetime, tz_name: str) -> date:
    """Calendar day of *moment* in the named IANA time zone."""
    return ensure_utc(moment).astimezone(ZoneInfo(tz_name)).date()


def format_display_date(day: date) -> str:
    """Format like ``Sun, Oct 25, 2026``."""
    return f"{day:%a}, {day:%b} {day.day}, {day.year}"
