"""
Admin sign-in by emailed one-time code.

request_code() only sends codes to addresses that already have a profile;
sign_in() consumes the code, then resolves the profile and issues a session
token. There is no self-service sign-up: profiles are created by an admin.
"""

from __future__ import annotations

from dataclasses import dataclass

from errors import NotFoundError
from repositories.profile_repository import ProfileRepository
from schemas.models.otp import OtpType
from schemas.models.profile import Profile
from services.otp_service import OtpService
from services.token_service import TokenService
from shared.logging import get_logger

log = get_logger(__name__)

PROFILE_NOT_FOUND = "Profile not found"
NO_ACCOUNT = "Profile not found. Please contact an administrator to create an account."


@dataclass
class SignInResult:
    profile: Profile
    token: str


def normalize_identifier(identifier: str, type: str) -> str:
    identifier = identifier.strip()
    if type == OtpType.EMAIL.value:
        return identifier.lower()
    return identifier


class AuthService:
    def __init__(
        self,
        otp_service: OtpService,
        profile_repo: ProfileRepository,
        token_service: TokenService,
    ) -> None:
        self._otp = otp_service
        self._profiles = profile_repo
        self._tokens = token_service

    async def request_code(self, email: str) -> None:
        email = normalize_identifier(email, OtpType.EMAIL.value)
        if await self._profiles.get_by_email(email) is None:
            log.info("otp_request_unknown_profile", identifier=email)
            raise NotFoundError(NO_ACCOUNT)
        await self._otp.issue(email, OtpType.EMAIL.value)

    async def sign_in(self, identifier: str, code: str, type: str) -> SignInResult:
        identifier = normalize_identifier(identifier, type)
        await self._otp.verify(identifier, code, type)

        profile = await self._profiles.get_by_identifier(identifier, type)
        if profile is None:
            log.warning("signin_profile_missing", identifier=identifier, otp_type=type)
            raise NotFoundError(PROFILE_NOT_FOUND)

        token = self._tokens.issue(profile)
        log.info(
            "signin_success",
            profile_id=str(profile.id),
            is_admin=profile.is_admin,
        )
        return SignInResult(profile=profile, token=token)
