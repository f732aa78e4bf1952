"""
Event ORM model.

Maps to the `events` table.

One-time events are keyed off start_date. Recurring events carry a pattern
plus the day field that pattern needs (weekly → recurrence_day_of_week with
Sunday=0, monthly → recurrence_day_of_month). Their next occurrence is never
stored; services.recurrence derives it on every read.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from schemas.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class EventCategory(str, enum.Enum):
    SERVICE = "Service"
    PRAYER = "Prayer"
    RETREAT = "Retreat"
    BIBLE_STUDY = "Bible Study"
    OUTREACH = "Outreach"


class RecurrencePattern(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Event(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    category: Mapped[EventCategory] = mapped_column(
        Enum(EventCategory, name="event_category", values_callable=_enum_values),
        nullable=False,
    )
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), index=True)
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    time: Mapped[Optional[str]] = mapped_column(String(50))

    is_recurring: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    recurrence_pattern: Mapped[Optional[RecurrencePattern]] = mapped_column(
        Enum(RecurrencePattern, name="recurrence_pattern", values_callable=_enum_values)
    )
    recurrence_day_of_week: Mapped[Optional[int]] = mapped_column(Integer)
    recurrence_day_of_month: Mapped[Optional[int]] = mapped_column(Integer)
    recurrence_end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
