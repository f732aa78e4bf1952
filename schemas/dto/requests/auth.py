"""
Request DTOs for authentication endpoints.

OtpRequest     — POST /api/otp
SignInRequest  — POST /api/auth/signin
"""

from __future__ import annotations

from typing import Literal

from pydantic import EmailStr, Field

from schemas.dto.base import CamelModel


class OtpRequest(CamelModel):
    """Request body for POST /api/otp."""

    email: EmailStr


class SignInRequest(CamelModel):
    """Request body for POST /api/auth/signin.

    ``code`` is the one-time code that was emailed to ``identifier``.
    """

    identifier: str = Field(min_length=1, max_length=255)
    code: str = Field(min_length=1, max_length=12)
    type: Literal["email", "phone"] = "email"
