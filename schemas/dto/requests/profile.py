"""
Request DTOs for profile endpoints.

CreateProfileRequest — POST /api/profiles
UpdateProfileRequest — PUT /api/profiles/{id}  (admin, partial)
UpdateMeRequest      — PUT /api/profiles/me
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import EmailStr, Field

from schemas.dto.base import CamelModel


class CreateProfileRequest(CamelModel):
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    is_admin: bool = False


class UpdateProfileRequest(CamelModel):
    not_nullable: ClassVar[frozenset[str]] = frozenset({"is_admin"})

    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    is_admin: Optional[bool] = None


class UpdateMeRequest(CamelModel):
    """Self-service edits; email and admin flag are admin-only."""

    phone: Optional[str] = Field(default=None, max_length=20)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
