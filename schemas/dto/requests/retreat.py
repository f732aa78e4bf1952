"""
Request DTOs for retreat and retreat-registration endpoints.

CreateRetreatRequest        — POST /api/retreat/retreats
UpdateRetreatRequest        — PUT /api/retreat/retreats/{id}  (partial)
ToggleRetreatActiveRequest  — PUT /api/retreat/retreats/{id}/toggle-active
CreateRegistrationRequest   — POST /api/retreat
UpdateRegistrationStatusRequest — PUT /api/retreat/{id}/status
"""

from __future__ import annotations

import uuid
from typing import Any, ClassVar, Optional

from pydantic import EmailStr, Field

from schemas.dto.base import CamelModel, DateOrDateTime
from schemas.models.retreat import RegistrationStatus, RegistrationType


class CreateRetreatRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: DateOrDateTime = None
    end_date: DateOrDateTime = None
    location: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = False


class UpdateRetreatRequest(CamelModel):
    not_nullable: ClassVar[frozenset[str]] = frozenset({"name", "is_active"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: DateOrDateTime = None
    end_date: DateOrDateTime = None
    location: Optional[str] = Field(default=None, max_length=255)
    is_active: Optional[bool] = None


class ToggleRetreatActiveRequest(CamelModel):
    """Body is optional; without ``isActive`` the flag is flipped."""

    is_active: Optional[bool] = None


class RegistrantRequest(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    age: Optional[int] = Field(default=None, gt=0)
    is_adult: bool = True
    dietary_restrictions: Optional[str] = None
    medical_notes: Optional[str] = None
    emergency_contact_name: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(default=None, max_length=20)
    profile_id: Optional[uuid.UUID] = None


class CreateRegistrationRequest(CamelModel):
    type: RegistrationType
    profile_id: uuid.UUID
    retreat_id: Optional[uuid.UUID] = None
    contact_name: str = Field(min_length=1, max_length=255)
    contact_email: EmailStr
    contact_phone: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = None
    registrants: list[RegistrantRequest] = Field(min_length=1)

    def registration_values(self) -> dict[str, Any]:
        return self.model_dump(exclude={"registrants"})

    def registrant_values(self) -> list[dict[str, Any]]:
        return [r.model_dump() for r in self.registrants]


class UpdateRegistrationStatusRequest(CamelModel):
    status: RegistrationStatus
