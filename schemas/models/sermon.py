"""
Sermon ORM model.

Maps to the `sermons` table. article_content holds the written companion to
the recording as {"intro": str, "paragraphs": [str], "takeaways": [str]}.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from schemas.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Sermon(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "sermons"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    speaker: Mapped[Optional[str]] = mapped_column(String(255))
    date: Mapped[Optional[dt.date]] = mapped_column(Date, index=True)
    thumbnail: Mapped[Optional[str]] = mapped_column(Text)
    youtube_id: Mapped[Optional[str]] = mapped_column(String(50))
    spotify_link: Mapped[Optional[str]] = mapped_column(Text)
    article_content: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON)
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
