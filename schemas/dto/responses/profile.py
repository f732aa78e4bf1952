"""Response DTOs for profile endpoints."""

from __future__ import annotations

import uuid
from typing import Optional

from schemas.dto.base import CamelModel, UtcDateTime


class ProfileResponse(CamelModel):
    id: uuid.UUID
    email: Optional[str] = None
    phone: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: bool
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ProfileListResponse(CamelModel):
    profiles: list[ProfileResponse]


class ProfileEnvelope(CamelModel):
    profile: ProfileResponse


class ProfileSavedResponse(CamelModel):
    profile: ProfileResponse
    message: str
