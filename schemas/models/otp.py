"""
One-time login code model.

Maps to the `otp_codes` table.

A row is usable while verified is False and expires_at is in the future.
verified is a one-way latch flipped by the first successful verification.
Rows are never deleted; expired ones simply stop matching.
"""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from schemas.models.base import Base, UUIDPrimaryKeyMixin
from shared.datetime_utils import utcnow


class OtpType(str, enum.Enum):
    EMAIL = "email"
    PHONE = "phone"


class OtpCode(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "otp_codes"
    __table_args__ = (Index("ix_otp_codes_lookup", "identifier", "type", "code"),)

    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    code: Mapped[str] = mapped_column(String(10), nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
