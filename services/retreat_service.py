"""
Retreats and retreat registrations.

A registration and all of its registrants are written in the request's
single unit of work: either the whole household is recorded or nothing is.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from errors import NotFoundError, ValidationError
from repositories.profile_repository import ProfileRepository
from repositories.retreat_repository import RegistrationRepository, RetreatRepository
from schemas.models.retreat import (
    RegistrationStatus,
    Retreat,
    RetreatRegistrant,
    RetreatRegistration,
)
from shared.datetime_utils import localize
from shared.logging import get_logger

log = get_logger(__name__)

RETREAT_NOT_FOUND = "Retreat not found"
REGISTRATION_NOT_FOUND = "Registration not found"
DATE_FIELDS = frozenset({"start_date", "end_date"})


class RetreatService:
    def __init__(
        self,
        retreats: RetreatRepository,
        registrations: RegistrationRepository,
        profiles: ProfileRepository,
        tz_name: str = "UTC",
    ) -> None:
        self._retreats = retreats
        self._registrations = registrations
        self._profiles = profiles
        self._tz = tz_name

    def _pin_dates(self, values: dict[str, Any]) -> dict[str, Any]:
        # date-only retreat days are site-local
        return {
            k: localize(v, self._tz) if k in DATE_FIELDS else v for k, v in values.items()
        }

    # ── retreats ───────────────────────────────────────────────────────────

    async def list_active(self) -> list[Retreat]:
        return await self._retreats.list_active()

    async def list_all(self) -> list[Retreat]:
        return await self._retreats.list_everything()

    async def get(self, retreat_id: uuid.UUID) -> Retreat:
        retreat = await self._retreats.get(retreat_id)
        if retreat is None:
            raise NotFoundError(RETREAT_NOT_FOUND)
        return retreat

    async def create(self, values: dict[str, Any]) -> Retreat:
        values = self._pin_dates(values)
        retreat = await self._retreats.add(Retreat(**values))
        log.info("retreat_created", retreat_id=str(retreat.id), is_active=retreat.is_active)
        return retreat

    async def update(self, retreat_id: uuid.UUID, values: dict[str, Any]) -> Retreat:
        retreat = await self.get(retreat_id)
        retreat = await self._retreats.update(retreat, self._pin_dates(values))
        log.info("retreat_updated", retreat_id=str(retreat.id), fields=sorted(values))
        return retreat

    async def toggle_active(
        self, retreat_id: uuid.UUID, is_active: Optional[bool] = None
    ) -> Retreat:
        """Set the active flag, or flip it when *is_active* is None."""
        retreat = await self.get(retreat_id)
        if is_active is None:
            is_active = not retreat.is_active
        retreat = await self._retreats.update(retreat, {"is_active": is_active})
        log.info("retreat_active_toggled", retreat_id=str(retreat.id), is_active=retreat.is_active)
        return retreat

    async def delete(self, retreat_id: uuid.UUID) -> None:
        retreat = await self.get(retreat_id)
        await self._retreats.delete(retreat)
        log.info("retreat_deleted", retreat_id=str(retreat_id))

    # ── registrations ──────────────────────────────────────────────────────

    async def register(
        self, values: dict[str, Any], registrants: list[dict[str, Any]]
    ) -> RetreatRegistration:
        """Record a registration with its registrants.

        Raises:
            ValidationError: no registrants.
            NotFoundError: the submitting profile or the retreat is missing.
        """
        if not registrants:
            raise ValidationError("At least one registrant is required", field="registrants")

        if await self._profiles.get(values["profile_id"]) is None:
            raise NotFoundError("Profile not found", field="profileId")
        retreat_id: Optional[uuid.UUID] = values.get("retreat_id")
        if retreat_id is not None:
            await self.get(retreat_id)

        registration = RetreatRegistration(
            **values,
            registrants=[RetreatRegistrant(**r) for r in registrants],
        )
        registration = await self._registrations.add(registration)
        log.info(
            "retreat_registration_created",
            registration_id=str(registration.id),
            retreat_id=str(retreat_id) if retreat_id else None,
            registrant_count=len(registrants),
        )
        return registration

    async def get_registration(self, registration_id: uuid.UUID) -> RetreatRegistration:
        registration = await self._registrations.get(registration_id)
        if registration is None:
            raise NotFoundError(REGISTRATION_NOT_FOUND)
        return registration

    async def list_registrations_for_profile(
        self, profile_id: uuid.UUID
    ) -> list[RetreatRegistration]:
        return await self._registrations.list_for_profile(profile_id)

    async def list_registrations(
        self, retreat_id: Optional[uuid.UUID] = None
    ) -> list[RetreatRegistration]:
        return await self._registrations.list_all(retreat_id)

    async def update_status(
        self, registration_id: uuid.UUID, status: RegistrationStatus
    ) -> RetreatRegistration:
        registration = await self.get_registration(registration_id)
        registration = await self._registrations.update(registration, {"status": status})
        log.info(
            "retreat_registration_status_updated",
            registration_id=str(registration.id),
            status=registration.status.value,
        )
        return registration
