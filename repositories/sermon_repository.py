"""Data access for sermons."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.base import BaseRepository
from schemas.models.sermon import Sermon

_NEWEST_FIRST = (Sermon.date.desc().nulls_last(), Sermon.created_at.desc())


class SermonRepository(BaseRepository[Sermon]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Sermon, session)

    async def list_public(self) -> list[Sermon]:
        return await self.find_all(Sermon.is_public.is_(True), order_by=_NEWEST_FIRST)

    async def list_everything(self) -> list[Sermon]:
        return await self.find_all(order_by=_NEWEST_FIRST)
