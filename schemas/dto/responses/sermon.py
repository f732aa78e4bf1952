"""Response DTOs for sermon endpoints."""

from __future__ import annotations

import datetime as dt
import uuid
from typing import Any, Optional

from schemas.dto.base import CamelModel, UtcDateTime


class SermonResponse(CamelModel):
    id: uuid.UUID
    title: str
    speaker: Optional[str] = None
    date: Optional[dt.date] = None
    thumbnail: Optional[str] = None
    youtube_id: Optional[str] = None
    spotify_link: Optional[str] = None
    article_content: Optional[dict[str, Any]] = None
    is_public: bool
    created_at: UtcDateTime
    updated_at: UtcDateTime


class SermonListResponse(CamelModel):
    sermons: list[SermonResponse]


class SermonEnvelope(CamelModel):
    sermon: SermonResponse


class SermonSavedResponse(CamelModel):
    sermon: SermonResponse
    message: str
