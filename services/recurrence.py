"""
Recurring-event projection — pure functions, no I/O.

next_occurrence() answers "when does this event happen next?" from the rule
stored on the event row and the caller's notion of now. It works on calendar
days in the site's time zone and always returns a day strictly after today:
a weekly Sunday event asked about on a Sunday answers next Sunday.

Short months clamp: a monthly rule for the 31st lands on Apr 30, Feb 28/29
and so on. A yearly rule anchored on Feb 29 lands on Feb 28 in common years.

upcoming() is the ordering used by the home page and the calendar: recurring
events sort by their next occurrence, one-time events by start_date.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Protocol, Sequence, TypeVar
from zoneinfo import ZoneInfo

from schemas.models.event import RecurrencePattern
from shared.datetime_utils import ensure_utc, local_date

DEFAULT_TIMEZONE = "UTC"


class RecurringEvent(Protocol):
    is_recurring: bool
    recurrence_pattern: Optional[str]
    recurrence_day_of_week: Optional[int]
    recurrence_day_of_month: Optional[int]
    recurrence_end_date: Optional[datetime]
    start_date: Optional[datetime]


E = TypeVar("E", bound=RecurringEvent)


def _sunday_based_weekday(day: date) -> int:
    """0 = Sunday … 6 = Saturday (Python's weekday() has Monday = 0)."""
    return (day.weekday() + 1) % 7


def _clamped(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def _next_month(year: int, month: int) -> tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)


def _project(event: RecurringEvent, today: date, tz_name: str) -> Optional[date]:
    pattern = RecurrencePattern(event.recurrence_pattern)

    if pattern is RecurrencePattern.DAILY:
        return today + timedelta(days=1)

    if pattern is RecurrencePattern.WEEKLY:
        target = event.recurrence_day_of_week
        if target is None:
            return None
        days_ahead = (target - _sunday_based_weekday(today)) % 7 or 7
        return today + timedelta(days=days_ahead)

    if pattern is RecurrencePattern.MONTHLY:
        target = event.recurrence_day_of_month
        if target is None:
            return None
        candidate = _clamped(today.year, today.month, target)
        if candidate <= today:
            year, month = _next_month(today.year, today.month)
            candidate = _clamped(year, month, target)
        return candidate

    # yearly
    if event.start_date is None:
        return None
    anchor = local_date(event.start_date, tz_name)
    candidate = _clamped(today.year, anchor.month, anchor.day)
    if candidate <= today:
        candidate = _clamped(today.year + 1, anchor.month, anchor.day)
    return candidate


def next_occurrence(
    event: RecurringEvent, now: datetime, tz_name: str = DEFAULT_TIMEZONE
) -> Optional[date]:
    """Next day the event's rule fires, strictly after today, or None.

    None means the event is not recurring, its rule is missing the field its
    pattern needs, or the rule has run past recurrence_end_date.
    """
    if not event.is_recurring or not event.recurrence_pattern:
        return None

    today = local_date(now, tz_name)

    end_day: Optional[date] = None
    if event.recurrence_end_date is not None:
        end_day = local_date(event.recurrence_end_date, tz_name)
        if end_day < today:
            return None

    candidate = _project(event, today, tz_name)
    if candidate is None:
        return None
    if end_day is not None and candidate > end_day:
        return None
    return candidate


@dataclass(frozen=True)
class Scheduled:
    """An event paired with the instant it sorts by."""

    event: RecurringEvent
    when: datetime
    next_occurrence: Optional[date]


def start_of_day(day: date, tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Midnight of *day* in the site time zone, as an aware datetime."""
    return datetime.combine(day, time.min, tzinfo=ZoneInfo(tz_name))


def resolve(
    event: RecurringEvent, now: datetime, tz_name: str = DEFAULT_TIMEZONE
) -> Optional[Scheduled]:
    """Effective date of one event, or None if it has nothing ahead of it."""
    if event.is_recurring:
        upcoming_day = next_occurrence(event, now, tz_name)
        if upcoming_day is None:
            return None
        return Scheduled(event, start_of_day(upcoming_day, tz_name), upcoming_day)

    start = ensure_utc(event.start_date)
    if start is None or start < ensure_utc(now):
        return None
    return Scheduled(event, start, None)


def upcoming(
    events: Sequence[E],
    now: datetime,
    limit: Optional[int] = None,
    tz_name: str = DEFAULT_TIMEZONE,
) -> list[Scheduled]:
    """Events that still have a date ahead, soonest first.

    sorted() is stable, so events resolving to the same instant keep their
    input order.
    """
    resolved = [s for s in (resolve(e, now, tz_name) for e in events) if s is not None]
    resolved.sort(key=lambda s: s.when)
    if limit is not None:
        return resolved[:limit]
    return resolved
