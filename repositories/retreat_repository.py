"""Data access for retreats and retreat registrations."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.base import BaseRepository
from schemas.models.retreat import Retreat, RetreatRegistration


class RetreatRepository(BaseRepository[Retreat]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Retreat, session)

    async def list_active(self) -> list[Retreat]:
        return await self.find_all(
            Retreat.is_active.is_(True),
            order_by=(Retreat.start_date.asc().nulls_last(),),
        )

    async def list_everything(self) -> list[Retreat]:
        return await self.find_all(order_by=(Retreat.start_date.desc().nulls_last(),))


class RegistrationRepository(BaseRepository[RetreatRegistration]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(RetreatRegistration, session)

    async def list_for_profile(self, profile_id: uuid.UUID) -> list[RetreatRegistration]:
        return await self.find_all(
            RetreatRegistration.profile_id == profile_id,
            order_by=(RetreatRegistration.created_at.desc(),),
        )

    async def list_all(
        self, retreat_id: Optional[uuid.UUID] = None
    ) -> list[RetreatRegistration]:
        where = []
        if retreat_id is not None:
            where.append(RetreatRegistration.retreat_id == retreat_id)
        return await self.find_all(*where, order_by=(RetreatRegistration.created_at.asc(),))
