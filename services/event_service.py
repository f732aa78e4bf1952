"""
Event service — calendar reads and admin writes.

Reads annotate each event with the date it should be shown under. Writes
check the recurrence invariant on the merged row (so a partial update that
switches a weekly event to monthly must also supply the day of month).
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Optional

from errors import NotFoundError, ValidationError
from repositories.event_repository import EventRepository
from schemas.models.event import Event, RecurrencePattern
from services import recurrence
from shared.datetime_utils import format_display_date, local_date, localize, utcnow
from shared.logging import get_logger

log = get_logger(__name__)

NEXT_PREFIX = "Next: "
DATE_TBD = "Date TBD"

# Naive values on these columns are site-local wall-clock times
DATE_FIELDS = frozenset({"start_date", "end_date", "recurrence_end_date"})


@dataclass
class EventForDisplay:
    event: Event
    display_date: str
    next_occurrence: Optional[date]
    is_upcoming: bool


def check_recurrence_rule(values: dict[str, Any]) -> None:
    """Reject recurring events whose pattern lacks the day it needs."""
    if not values.get("is_recurring"):
        return
    pattern = values.get("recurrence_pattern")
    if pattern is None:
        raise ValidationError(
            "Recurring events need a recurrence pattern", field="recurrencePattern"
        )
    pattern = RecurrencePattern(pattern)
    if pattern is RecurrencePattern.WEEKLY and values.get("recurrence_day_of_week") is None:
        raise ValidationError(
            "Weekly events need a day of week", field="recurrenceDayOfWeek"
        )
    if pattern is RecurrencePattern.MONTHLY and values.get("recurrence_day_of_month") is None:
        raise ValidationError(
            "Monthly events need a day of month", field="recurrenceDayOfMonth"
        )


class EventService:
    def __init__(
        self,
        repo: EventRepository,
        tz_name: str = recurrence.DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repo = repo
        self._tz = tz_name
        self._clock = clock

    # ── display helpers ────────────────────────────────────────────────────

    def format_display_date(self, event: Event, next_day: Optional[date]) -> str:
        if event.is_recurring and next_day is not None:
            return NEXT_PREFIX + format_display_date(next_day)
        if event.start_date is not None:
            return format_display_date(local_date(event.start_date, self._tz))
        return DATE_TBD

    def for_display(self, event: Event, now: datetime) -> EventForDisplay:
        next_day = recurrence.next_occurrence(event, now, self._tz)
        return EventForDisplay(
            event=event,
            display_date=self.format_display_date(event, next_day),
            next_occurrence=next_day,
            is_upcoming=recurrence.resolve(event, now, self._tz) is not None,
        )

    # ── reads ──────────────────────────────────────────────────────────────

    async def list_for_display(self) -> list[EventForDisplay]:
        """All active events in start_date order, annotated for the calendar."""
        now = self._clock()
        return [self.for_display(e, now) for e in await self._repo.list_active()]

    async def list_upcoming(self, limit: Optional[int] = None) -> list[EventForDisplay]:
        """Active events that still have a date ahead, soonest first."""
        now = self._clock()
        scheduled = recurrence.upcoming(
            await self._repo.list_active(), now, limit=limit, tz_name=self._tz
        )
        return [self.for_display(s.event, now) for s in scheduled]

    async def list_all(self) -> list[EventForDisplay]:
        """Every event, inactive ones included (admin view)."""
        now = self._clock()
        return [self.for_display(e, now) for e in await self._repo.list_everything()]

    async def get(self, event_id: uuid.UUID) -> Event:
        event = await self._repo.get(event_id)
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def annotate(self, event: Event) -> EventForDisplay:
        return self.for_display(event, self._clock())

    async def get_for_display(self, event_id: uuid.UUID) -> EventForDisplay:
        return self.annotate(await self.get(event_id))

    # ── writes ─────────────────────────────────────────────────────────────

    def _pin_dates(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            k: localize(v, self._tz) if k in DATE_FIELDS else v for k, v in values.items()
        }

    async def create(self, values: dict[str, Any]) -> Event:
        values = self._pin_dates(values)
        check_recurrence_rule(values)
        event = await self._repo.add(Event(**values))
        log.info("event_created", event_id=str(event.id), recurring=event.is_recurring)
        return event

    async def update(self, event_id: uuid.UUID, values: dict[str, Any]) -> Event:
        values = self._pin_dates(values)
        event = await self.get(event_id)
        merged = {
            "is_recurring": event.is_recurring,
            "recurrence_pattern": event.recurrence_pattern,
            "recurrence_day_of_week": event.recurrence_day_of_week,
            "recurrence_day_of_month": event.recurrence_day_of_month,
        }
        merged.update(values)
        check_recurrence_rule(merged)
        event = await self._repo.update(event, values)
        log.info("event_updated", event_id=str(event.id), fields=sorted(values))
        return event

    async def deactivate(self, event_id: uuid.UUID) -> None:
        """Soft delete: the row stays for the admin list, public reads skip it."""
        event = await self.get(event_id)
        await self._repo.update(event, {"is_active": False})
        log.info("event_deactivated", event_id=str(event.id))
