"""Profile administration and self-service edits."""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError

from errors import ConflictError, NotFoundError
from repositories.profile_repository import ProfileRepository
from schemas.models.profile import Profile
from shared.logging import get_logger

log = get_logger(__name__)

# Fields a signed-in user may change on their own profile
SELF_EDITABLE_FIELDS = frozenset({"first_name", "last_name", "phone", "avatar_url"})


class ProfileService:
    def __init__(self, repo: ProfileRepository) -> None:
        self._repo = repo

    async def list_profiles(self) -> list[Profile]:
        return await self._repo.list_by_name()

    async def get(self, profile_id: uuid.UUID) -> Profile:
        profile = await self._repo.get(profile_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    async def _ensure_email_free(self, email: str, owner_id: uuid.UUID | None = None) -> None:
        existing = await self._repo.get_by_email(email)
        if existing is not None and existing.id != owner_id:
            raise ConflictError("A profile with this email already exists", field="email")

    async def create(self, values: dict[str, Any]) -> Profile:
        values = dict(values)
        if values.get("email"):
            values["email"] = values["email"].strip().lower()
            await self._ensure_email_free(values["email"])
        profile = await self._repo.add(Profile(**values))
        log.info("profile_created", profile_id=str(profile.id), is_admin=profile.is_admin)
        return profile

    async def update(self, profile_id: uuid.UUID, values: dict[str, Any]) -> Profile:
        profile = await self.get(profile_id)
        values = dict(values)
        if values.get("email"):
            values["email"] = values["email"].strip().lower()
            await self._ensure_email_free(values["email"], owner_id=profile.id)
        profile = await self._repo.update(profile, values)
        log.info("profile_updated", profile_id=str(profile.id), fields=sorted(values))
        return profile

    async def update_own(self, profile_id: uuid.UUID, values: dict[str, Any]) -> Profile:
        """Apply a self-service edit; admin-only fields are dropped."""
        allowed = {k: v for k, v in values.items() if k in SELF_EDITABLE_FIELDS}
        return await self.update(profile_id, allowed)

    async def delete(self, profile_id: uuid.UUID) -> None:
        profile = await self.get(profile_id)
        try:
            await self._repo.delete(profile)
        except IntegrityError as e:
            # Still referenced by a retreat registration
            raise ConflictError("Profile is referenced by retreat registrations") from e
        log.info("profile_deleted", profile_id=str(profile_id))
