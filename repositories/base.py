"""
Base repository with generic async CRUD operations.

Repositories only talk to the session: they add, flush and query, and never
commit. The request's unit of work (dependencies.get_session) commits once
the handler returns, so a handler that writes several rows either persists
all of them or none.
"""

from __future__ import annotations

import uuid
from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schemas.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository for one mapped class.

    Example:
        class SermonRepository(BaseRepository[Sermon]):
            def __init__(self, session: AsyncSession):
                super().__init__(Sermon, session)
    """

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def get(self, id: uuid.UUID) -> Optional[ModelType]:
        return await self.session.get(self.model, id)

    async def find_all(self, *where: Any, order_by: Sequence[Any] = ()) -> list[ModelType]:
        stmt = select(self.model).where(*where).order_by(*order_by)
        result = await self.session.scalars(stmt)
        return list(result.all())

    async def add(self, obj: ModelType) -> ModelType:
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def update(self, obj: ModelType, values: dict[str, Any]) -> ModelType:
        for field, value in values.items():
            setattr(obj, field, value)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        await self.session.delete(obj)
        await self.session.flush()
