"""
Declarative base and shared column mixins for all ORM models.

Every table uses a UUID primary key generated client-side and carries
created_at / updated_at stamps in UTC. ``Uuid`` and ``DateTime(timezone=True)``
map to native types on PostgreSQL and to strings on SQLite.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from shared.datetime_utils import utcnow


class Base(DeclarativeBase):
    pass


class UUIDPrimaryKeyMixin:
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamp fields.

    The defaults are callables so each row gets its own insert time.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
