"""
Authentication endpoints.

POST /api/otp            — email a one-time login code to an existing profile
POST /api/auth/signin    — exchange identifier + code for a session cookie
POST /api/auth/signout   — clear the session cookie
GET  /api/auth/session   — the signed-in user, or 401
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from config import AppSettings
from dependencies import get_auth_service, get_settings, require_user
from schemas.dto.requests.auth import OtpRequest, SignInRequest
from schemas.dto.responses.auth import SessionResponse, SessionUser, SignInResponse
from schemas.dto.responses.common import ERROR_RESPONSES, SuccessResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"], responses=ERROR_RESPONSES)


def set_session_cookie(response: Response, token: str, settings: AppSettings) -> None:
    response.set_cookie(
        settings.auth.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        path="/",
        max_age=settings.auth.session_ttl_seconds,
    )


def clear_session_cookie(response: Response, settings: AppSettings) -> None:
    response.delete_cookie(
        settings.auth.session_cookie_name,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        path="/",
    )


@router.post("/otp", response_model=SuccessResponse)
async def request_otp(
    body: OtpRequest,
    auth: AuthService = Depends(get_auth_service),
) -> SuccessResponse:
    await auth.request_code(body.email)
    return SuccessResponse(success=True, message="OTP code sent to your email")


@router.post("/auth/signin", response_model=SignInResponse)
async def sign_in(
    body: SignInRequest,
    response: Response,
    settings: AppSettings = Depends(get_settings),
    auth: AuthService = Depends(get_auth_service),
) -> SignInResponse:
    result = await auth.sign_in(body.identifier, body.code, body.type)
    set_session_cookie(response, result.token, settings)
    return SignInResponse(success=True, user=SessionUser.from_profile(result.profile))


@router.post("/auth/signout", response_model=SuccessResponse)
async def sign_out(
    response: Response,
    settings: AppSettings = Depends(get_settings),
) -> SuccessResponse:
    clear_session_cookie(response, settings)
    return SuccessResponse(success=True, message="Signed out")


@router.get("/auth/session", response_model=SessionResponse)
async def current_session(user: SessionUser = Depends(require_user)) -> SessionResponse:
    return SessionResponse(user=user)
