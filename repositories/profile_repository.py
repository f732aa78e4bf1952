"""Data access for profiles."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from repositories.base import BaseRepository
from schemas.models.otp import OtpType
from schemas.models.profile import Profile


class ProfileRepository(BaseRepository[Profile]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Profile, session)

    async def get_by_email(self, email: str) -> Optional[Profile]:
        """Case-insensitive lookup; emails are stored lower-cased."""
        stmt = select(Profile).where(func.lower(Profile.email) == email.strip().lower())
        return await self.session.scalar(stmt.limit(1))

    async def get_by_phone(self, phone: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.phone == phone.strip())
        return await self.session.scalar(stmt.limit(1))

    async def get_by_identifier(self, identifier: str, type: str) -> Optional[Profile]:
        if type == OtpType.PHONE.value:
            return await self.get_by_phone(identifier)
        return await self.get_by_email(identifier)

    async def list_by_name(self) -> list[Profile]:
        return await self.find_all(
            order_by=(Profile.last_name.asc(), Profile.first_name.asc(), Profile.email.asc())
        )
