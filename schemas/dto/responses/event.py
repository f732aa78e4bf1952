"""
Response DTOs for event endpoints.

Every event carries its display annotation alongside the stored columns:
displayDate ("Next: Sun, Oct 25, 2026", "Sat, Nov 14, 2026" or "Date TBD"),
nextOccurrence and isUpcoming.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from schemas.dto.base import CamelModel, OptionalUtcDateTime, UtcDateTime
from schemas.models.event import EventCategory, RecurrencePattern
from services.event_service import EventForDisplay


class EventResponse(CamelModel):
    id: uuid.UUID
    title: str
    description: Optional[str] = None
    category: EventCategory
    location: str
    start_date: OptionalUtcDateTime = None
    end_date: OptionalUtcDateTime = None
    time: Optional[str] = None
    is_recurring: bool
    recurrence_pattern: Optional[RecurrencePattern] = None
    recurrence_day_of_week: Optional[int] = None
    recurrence_day_of_month: Optional[int] = None
    recurrence_end_date: OptionalUtcDateTime = None
    is_active: bool
    created_at: UtcDateTime
    updated_at: UtcDateTime

    display_date: str
    next_occurrence: Optional[date] = None
    is_upcoming: bool

    @classmethod
    def from_display(cls, item: EventForDisplay) -> "EventResponse":
        row = {c.key: getattr(item.event, c.key) for c in item.event.__table__.columns}
        return cls.model_validate(
            {
                **row,
                "display_date": item.display_date,
                "next_occurrence": item.next_occurrence,
                "is_upcoming": item.is_upcoming,
            }
        )


class EventListResponse(CamelModel):
    events: list[EventResponse]


class EventEnvelope(CamelModel):
    event: EventResponse


class EventSavedResponse(CamelModel):
    event: EventResponse
    message: str
