"""
Response DTOs for authentication endpoints.

SessionUser     — the signed-in profile as carried by the session token
SignInResponse  — POST /api/auth/signin  (200)
SessionResponse — GET /api/auth/session  (200)
"""

from __future__ import annotations

from typing import Any, Optional

from schemas.dto.base import CamelModel
from schemas.models.profile import Profile


class SessionUser(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_admin: bool = False

    @classmethod
    def from_profile(cls, profile: Profile) -> "SessionUser":
        return cls(
            id=str(profile.id),
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            is_admin=profile.is_admin,
        )

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "SessionUser":
        return cls(
            id=claims["sub"],
            email=claims.get("email"),
            first_name=claims.get("firstName"),
            last_name=claims.get("lastName"),
            is_admin=bool(claims.get("isAdmin", False)),
        )


class SignInResponse(CamelModel):
    success: bool
    user: SessionUser


class SessionResponse(CamelModel):
    user: SessionUser
