"""
Request DTOs for event endpoints.

CreateEventRequest — POST /api/events
UpdateEventRequest — PUT /api/events/{id}  (partial)

Enum fields reject unknown values here; the cross-field recurrence rule
(weekly needs a weekday, monthly a day of month) is enforced by the service
so it can be checked against the stored row on partial updates.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from schemas.dto.base import CamelModel, DateOrDateTime
from schemas.models.event import EventCategory, RecurrencePattern


class CreateEventRequest(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    category: EventCategory
    location: str = Field(min_length=1, max_length=255)
    start_date: DateOrDateTime = None
    end_date: DateOrDateTime = None
    time: Optional[str] = Field(default=None, max_length=50)
    is_recurring: bool = False
    recurrence_pattern: Optional[RecurrencePattern] = None
    recurrence_day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    recurrence_day_of_month: Optional[int] = Field(default=None, ge=1, le=31)
    recurrence_end_date: DateOrDateTime = None
    is_active: bool = True


class UpdateEventRequest(CamelModel):
    """All fields optional; only fields present in the body are written."""

    not_nullable: ClassVar[frozenset[str]] = frozenset(
        {"title", "category", "location", "is_recurring", "is_active"}
    )

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[EventCategory] = None
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    start_date: DateOrDateTime = None
    end_date: DateOrDateTime = None
    time: Optional[str] = Field(default=None, max_length=50)
    is_recurring: Optional[bool] = None
    recurrence_pattern: Optional[RecurrencePattern] = None
    recurrence_day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    recurrence_day_of_month: Optional[int] = Field(default=None, ge=1, le=31)
    recurrence_end_date: DateOrDateTime = None
    is_active: Optional[bool] = None
