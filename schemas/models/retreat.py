"""
Retreat ORM models.

Maps to the `retreats`, `retreat_registrations` and `retreat_registrants`
tables.

A registration is submitted by one profile (the main contact) and lists one
or more registrants: a single person for "individual", the whole household
for "family". Registrants optionally link to their own profile. Deleting a
registration removes its registrants.
"""

from __future__ import annotations

import enum
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schemas.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from schemas.models.event import _enum_values


class RegistrationType(str, enum.Enum):
    INDIVIDUAL = "individual"
    FAMILY = "family"


class RegistrationStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    WAITLISTED = "waitlisted"


class Retreat(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "retreats"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    start_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    location: Mapped[Optional[str]] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class RetreatRegistration(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "retreat_registrations"

    type: Mapped[RegistrationType] = mapped_column(
        Enum(RegistrationType, name="registration_type", values_callable=_enum_values),
        nullable=False,
    )
    profile_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("profiles.id"), nullable=False, index=True
    )
    retreat_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("retreats.id", ondelete="SET NULL"), index=True
    )
    contact_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(20))
    status: Mapped[RegistrationStatus] = mapped_column(
        Enum(RegistrationStatus, name="registration_status", values_callable=_enum_values),
        default=RegistrationStatus.PENDING,
        nullable=False,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text)

    registrants: Mapped[list["RetreatRegistrant"]] = relationship(
        back_populates="registration",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class RetreatRegistrant(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "retreat_registrants"

    registration_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("retreat_registrations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    profile_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, ForeignKey("profiles.id"))
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[Optional[int]] = mapped_column(Integer)
    is_adult: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    dietary_restrictions: Mapped[Optional[str]] = mapped_column(Text)
    medical_notes: Mapped[Optional[str]] = mapped_column(Text)
    emergency_contact_name: Mapped[Optional[str]] = mapped_column(String(255))
    emergency_contact_phone: Mapped[Optional[str]] = mapped_column(String(20))

    registration: Mapped[RetreatRegistration] = relationship(back_populates="registrants")
