"""
One-time login codes: issue and verify.

issue() stores a fresh 6-digit code valid for OTP_EXPIRY_SECONDS and emails
it. Earlier codes for the same address are left alone and stay usable until
they expire or are used.

verify() consumes a code exactly once. Wrong code, wrong address, expired
and already-used all fail with the same message so a caller learns nothing
about which one it was.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

from config import OtpSettings
from errors import AuthenticationError, DeliveryError, ValidationError
from infrastructure.email.protocol import EmailProvider
from repositories.otp_repository import OtpRepository
from schemas.models.otp import OtpCode, OtpType
from shared.datetime_utils import ensure_utc, utcnow
from shared.generators import generate_otp_code
from shared.logging import get_logger

log = get_logger(__name__)

INVALID_OR_EXPIRED = "Invalid or expired OTP code"


class OtpService:
    def __init__(
        self,
        repo: OtpRepository,
        email_provider: EmailProvider,
        settings: OtpSettings,
        clock: Callable[[], datetime] = utcnow,
        generator: Callable[[int], str] = generate_otp_code,
    ) -> None:
        self._repo = repo
        self._email = email_provider
        self._settings = settings
        self._clock = clock
        self._generate = generator

    async def issue(self, identifier: str, type: str = OtpType.EMAIL.value) -> OtpCode:
        """Persist a new code for *identifier* and deliver it.

        Raises:
            ValidationError: *type* has no delivery channel.
            DeliveryError: the email provider did not accept the message.
        """
        if type != OtpType.EMAIL.value:
            raise ValidationError(f"Cannot deliver codes by {type}", field="type")

        now = ensure_utc(self._clock())
        otp = await self._repo.add(
            OtpCode(
                identifier=identifier,
                type=type,
                code=self._generate(self._settings.otp_length),
                verified=False,
                expires_at=now + timedelta(seconds=self._settings.otp_expiry_seconds),
                created_at=now,
            )
        )
        log.info("otp_issued", identifier=identifier, otp_id=str(otp.id))

        expiry_minutes = self._settings.otp_expiry_seconds // 60
        sent = await self._email.send_login_code(identifier, otp.code, expiry_minutes)
        if not sent:
            log.error("otp_delivery_failed", identifier=identifier, otp_id=str(otp.id))
            raise DeliveryError("Failed to send OTP code")
        return otp

    async def verify(self, identifier: str, code: str, type: str = OtpType.EMAIL.value) -> None:
        """Consume a live code for *identifier*.

        Raises:
            AuthenticationError: no unexpired, unused code matches.
        """
        now = ensure_utc(self._clock())
        if not await self._repo.consume(identifier, type, code.strip(), now):
            log.warning("otp_verification_failed", identifier=identifier, otp_type=type)
            raise AuthenticationError(INVALID_OR_EXPIRED)
        log.info("otp_verified", identifier=identifier, otp_type=type)
