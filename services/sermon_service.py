"""Sermon library: public listing and admin management."""

from __future__ import annotations

import uuid
from typing import Any

from errors import NotFoundError
from repositories.sermon_repository import SermonRepository
from schemas.models.sermon import Sermon
from shared.logging import get_logger

log = get_logger(__name__)

SERMON_NOT_FOUND = "Sermon not found"


class SermonService:
    def __init__(self, repo: SermonRepository) -> None:
        self._repo = repo

    async def list_public(self) -> list[Sermon]:
        return await self._repo.list_public()

    async def list_all(self) -> list[Sermon]:
        return await self._repo.list_everything()

    async def get(self, sermon_id: uuid.UUID, include_private: bool = False) -> Sermon:
        """Fetch one sermon. Private sermons look missing unless *include_private*."""
        sermon = await self._repo.get(sermon_id)
        if sermon is None or (not sermon.is_public and not include_private):
            raise NotFoundError(SERMON_NOT_FOUND)
        return sermon

    async def create(self, values: dict[str, Any]) -> Sermon:
        sermon = await self._repo.add(Sermon(**values))
        log.info("sermon_created", sermon_id=str(sermon.id), is_public=sermon.is_public)
        return sermon

    async def update(self, sermon_id: uuid.UUID, values: dict[str, Any]) -> Sermon:
        sermon = await self.get(sermon_id, include_private=True)
        sermon = await self._repo.update(sermon, values)
        log.info("sermon_updated", sermon_id=str(sermon.id), fields=sorted(values))
        return sermon

    async def toggle_visibility(self, sermon_id: uuid.UUID) -> Sermon:
        sermon = await self.get(sermon_id, include_private=True)
        sermon = await self._repo.update(sermon, {"is_public": not sermon.is_public})
        log.info("sermon_visibility_toggled", sermon_id=str(sermon.id), is_public=sermon.is_public)
        return sermon

    async def delete(self, sermon_id: uuid.UUID) -> None:
        sermon = await self.get(sermon_id, include_private=True)
        await self._repo.delete(sermon)
        log.info("sermon_deleted", sermon_id=str(sermon_id))
