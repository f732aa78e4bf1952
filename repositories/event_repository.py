"""Data access for events."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.base import BaseRepository
from schemas.models.event import Event


class EventRepository(BaseRepository[Event]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Event, session)

    async def list_active(self) -> list[Event]:
        """Active events ordered by start_date (undated events last)."""
        return await self.find_all(
            Event.is_active.is_(True),
            order_by=(Event.start_date.asc().nulls_last(), Event.created_at.asc()),
        )

    async def list_everything(self) -> list[Event]:
        return await self.find_all(
            order_by=(Event.start_date.asc().nulls_last(), Event.created_at.asc())
        )
