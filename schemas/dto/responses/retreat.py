"""Response DTOs for retreat and retreat-registration endpoints."""

from __future__ import annotations

import uuid
from typing import Optional

from schemas.dto.base import CamelModel, OptionalUtcDateTime, UtcDateTime
from schemas.models.retreat import RegistrationStatus, RegistrationType


class RetreatResponse(CamelModel):
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    start_date: OptionalUtcDateTime = None
    end_date: OptionalUtcDateTime = None
    location: Optional[str] = None
    is_active: bool
    created_at: UtcDateTime
    updated_at: UtcDateTime


class RetreatListResponse(CamelModel):
    retreats: list[RetreatResponse]


class RetreatEnvelope(CamelModel):
    retreat: RetreatResponse


class RetreatSavedResponse(CamelModel):
    retreat: RetreatResponse
    message: str


class RegistrantResponse(CamelModel):
    id: uuid.UUID
    registration_id: uuid.UUID
    profile_id: Optional[uuid.UUID] = None
    first_name: str
    last_name: str
    age: Optional[int] = None
    is_adult: bool
    dietary_restrictions: Optional[str] = None
    medical_notes: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    created_at: UtcDateTime


class RegistrationResponse(CamelModel):
    id: uuid.UUID
    type: RegistrationType
    profile_id: uuid.UUID
    retreat_id: Optional[uuid.UUID] = None
    contact_name: str
    contact_email: str
    contact_phone: Optional[str] = None
    status: RegistrationStatus
    notes: Optional[str] = None
    created_at: UtcDateTime
    updated_at: UtcDateTime


class RegistrationDetailResponse(CamelModel):
    """GET /api/retreat/{id}: the registration and its registrants side by side."""

    registration: RegistrationResponse
    registrants: list[RegistrantResponse]


class RegistrationSavedResponse(CamelModel):
    registration: RegistrationResponse
    registrants: list[RegistrantResponse]
    message: str


class RegistrationListResponse(CamelModel):
    registrations: list[RegistrationResponse]
