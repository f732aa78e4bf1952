"""
Data access for one-time login codes.

consume() finds and latches a matching code in one UPDATE statement. The
outer ``verified = false`` predicate is re-checked by the database against
the row it is about to write, so when two requests race on the same code
only one of them sees a row count of 1.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from repositories.base import BaseRepository
from schemas.models.otp import OtpCode


class OtpRepository(BaseRepository[OtpCode]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(OtpCode, session)

    async def consume(
        self, identifier: str, type: str, code: str, now: datetime
    ) -> bool:
        """Flip one live matching row to verified. Returns False if none matched."""
        live = aliased(OtpCode)
        candidate = (
            select(live.id)
            .where(
                live.identifier == identifier,
                live.type == type,
                live.code == code,
                live.verified.is_(False),
                live.expires_at > now,
            )
            .order_by(live.created_at.desc())
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            update(OtpCode)
            .where(OtpCode.id == candidate, OtpCode.verified.is_(False))
            .values(verified=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
