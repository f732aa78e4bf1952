"""
Request DTOs for sermon endpoints.

CreateSermonRequest — POST /api/sermons
UpdateSermonRequest — PUT /api/sermons/{id}  (partial)
"""

from __future__ import annotations

import datetime as dt
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field, HttpUrl

from schemas.dto.base import CamelModel

_URL_FIELDS = ("thumbnail", "spotify_link")


def _stringify_urls(values: dict[str, Any]) -> dict[str, Any]:
    for key in _URL_FIELDS:
        if values.get(key) is not None:
            values[key] = str(values[key])
    return values


class ArticleContent(BaseModel):
    """Written companion to a sermon recording."""

    intro: str
    paragraphs: list[str]
    takeaways: list[str]


class CreateSermonRequest(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    speaker: str = Field(min_length=1, max_length=255)
    date: dt.date
    thumbnail: Optional[HttpUrl] = None
    youtube_id: Optional[str] = Field(default=None, max_length=50)
    spotify_link: Optional[HttpUrl] = None
    article_content: Optional[ArticleContent] = None
    is_public: bool = True

    def to_values(self) -> dict[str, Any]:
        return _stringify_urls(self.model_dump())


class UpdateSermonRequest(CamelModel):
    not_nullable: ClassVar[frozenset[str]] = frozenset({"title", "is_public"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    speaker: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    thumbnail: Optional[HttpUrl] = None
    youtube_id: Optional[str] = Field(default=None, max_length=50)
    spotify_link: Optional[HttpUrl] = None
    article_content: Optional[ArticleContent] = None
    is_public: Optional[bool] = None

    def to_values(self) -> dict[str, Any]:
        return _stringify_urls(super().to_values())
