"""
Session tokens for signed-in profiles.

HS256 JWTs carrying the profile id in ``sub`` plus the display claims the
admin panel needs (email, names, isAdmin). They are stateless: signing out
only clears the cookie.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable

import jwt

from config import AuthSettings
from schemas.models.profile import Profile
from shared.datetime_utils import utcnow

ALGORITHM = "HS256"


class TokenService:
    def __init__(
        self, settings: AuthSettings, clock: Callable[[], datetime] = utcnow
    ) -> None:
        self._settings = settings
        self._clock = clock

    def _secret(self) -> str:
        secret = self._settings.jwt_secret
        if not secret:
            raise RuntimeError("JWT_SECRET must be set to issue session tokens")
        return secret

    def issue(self, profile: Profile) -> str:
        now = self._clock()
        claims = {
            "iss": self._settings.jwt_issuer,
            "aud": self._settings.jwt_audience,
            "sub": str(profile.id),
            "iat": int(now.timestamp()),
            "exp": int(
                (now + timedelta(seconds=self._settings.session_ttl_seconds)).timestamp()
            ),
            "email": profile.email,
            "firstName": profile.first_name,
            "lastName": profile.last_name,
            "isAdmin": bool(profile.is_admin),
            "amr": ["otp"],
        }
        return jwt.encode(claims, self._secret(), algorithm=ALGORITHM)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature, issuer, audience and expiry.

        Raises:
            jwt.InvalidTokenError: on any verification failure.
        """
        return jwt.decode(
            token,
            self._secret(),
            algorithms=[ALGORITHM],
            audience=self._settings.jwt_audience,
            issuer=self._settings.jwt_issuer,
        )
