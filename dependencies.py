"""
FastAPI dependency providers.

All injectable dependencies are defined here as plain functions used with
FastAPI's Depends() system. Long-lived collaborators (settings, session
factory, email provider, clock) live on app.state and are set up by
create_app(); everything request-scoped is built from them here.
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncIterator, Callable, Optional

import jwt
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from config import AppSettings
from errors import AuthenticationError, ForbiddenError
from infrastructure.email.protocol import EmailProvider
from repositories.event_repository import EventRepository
from repositories.otp_repository import OtpRepository
from repositories.profile_repository import ProfileRepository
from repositories.retreat_repository import RegistrationRepository, RetreatRepository
from repositories.sermon_repository import SermonRepository
from schemas.dto.responses.auth import SessionUser
from services.auth_service import AuthService
from services.event_service import EventService
from services.otp_service import OtpService
from services.profile_service import ProfileService
from services.retreat_service import RetreatService
from services.sermon_service import SermonService
from services.token_service import TokenService
from shared.logging import get_logger

log = get_logger(__name__)


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_clock(request: Request) -> Callable[[], datetime]:
    return request.app.state.clock


def get_email_provider(request: Request) -> EmailProvider:
    return request.app.state.email_provider


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """One AsyncSession per request, committed once the handler returns.

    Any exception raised by the handler rolls the whole unit of work back.
    """
    async with request.app.state.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ── Services ─────────────────────────────────────────────────────────────────


def get_token_service(settings: AppSettings = Depends(get_settings)) -> TokenService:
    return TokenService(settings.auth)


def get_event_service(
    session: AsyncSession = Depends(get_session),
    settings: AppSettings = Depends(get_settings),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> EventService:
    return EventService(EventRepository(session), settings.site_timezone, clock)


def get_otp_service(
    session: AsyncSession = Depends(get_session),
    settings: AppSettings = Depends(get_settings),
    email_provider: EmailProvider = Depends(get_email_provider),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> OtpService:
    return OtpService(OtpRepository(session), email_provider, settings.otp, clock)


def get_auth_service(
    session: AsyncSession = Depends(get_session),
    otp_service: OtpService = Depends(get_otp_service),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(otp_service, ProfileRepository(session), token_service)


def get_profile_service(session: AsyncSession = Depends(get_session)) -> ProfileService:
    return ProfileService(ProfileRepository(session))


def get_sermon_service(session: AsyncSession = Depends(get_session)) -> SermonService:
    return SermonService(SermonRepository(session))


def get_retreat_service(
    session: AsyncSession = Depends(get_session),
    settings: AppSettings = Depends(get_settings),
) -> RetreatService:
    return RetreatService(
        RetreatRepository(session),
        RegistrationRepository(session),
        ProfileRepository(session),
        settings.site_timezone,
    )


# ── Auth ─────────────────────────────────────────────────────────────────────


def _extract_token(request: Request, cookie_name: str) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.lower().startswith("bearer "):
        token = auth_header.split(" ", 1)[1].strip()
        if token:
            return token
    return request.cookies.get(cookie_name)


def get_current_user(
    request: Request,
    settings: AppSettings = Depends(get_settings),
    token_service: TokenService = Depends(get_token_service),
) -> Optional[SessionUser]:
    """Resolve the session from the Bearer header or the session cookie.

    Returns None when no valid session is present; never raises.
    """
    token = _extract_token(request, settings.auth.session_cookie_name)
    if not token or not settings.auth.jwt_secret:
        return None
    try:
        claims = token_service.decode(token)
    except jwt.InvalidTokenError as e:
        log.info("session_token_rejected", reason=type(e).__name__)
        return None
    return SessionUser.from_claims(claims)


def require_user(
    user: Optional[SessionUser] = Depends(get_current_user),
) -> SessionUser:
    if user is None:
        raise AuthenticationError("Authentication required")
    return user


def require_admin(
    user: Optional[SessionUser] = Depends(get_current_user),
) -> SessionUser:
    if user is None or not user.is_admin:
        raise ForbiddenError("Unauthorized")
    return user
