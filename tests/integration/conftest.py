"""
Integration test configuration.

Each test gets the real app (create_app) on a fresh SQLite file database,
an email provider that records codes instead of sending them, and a clock
pinned to Wednesday 2026-10-21 15:00 UTC (11:00 in Komoka).
An admin profile is provisioned before the app starts, the same way
create_admin.py does it in production.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import (
    AppSettings,
    AuthSettings,
    DatabaseSettings,
    EmailSettings,
    LoggingSettings,
    OtpSettings,
    SentrySettings,
)
from create_admin import provision_admin

ADMIN_EMAIL = "admin@churchinkomoka.com"
WEDNESDAY = datetime(2026, 10, 21, 15, 0, tzinfo=timezone.utc)


class FakeEmailProvider:
    """Captures outgoing login codes; ``fail`` simulates a provider outage."""

    def __init__(self) -> None:
        self.codes: dict[str, list[str]] = {}
        self.fail = False
        self.configured = True

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send_login_code(self, email: str, code: str, expiry_minutes: int) -> bool:
        if self.fail:
            return False
        self.codes.setdefault(email, []).append(code)
        return True

    def last_code(self, email: str) -> str:
        return self.codes[email][-1]


class FrozenClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        env="test",
        db=DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db"),
        auth=AuthSettings(jwt_secret="test-secret", cookie_secure=False),
        otp=OtpSettings(),
        email=EmailSettings(),
        logging=LoggingSettings(log_level="WARNING"),
        sentry=SentrySettings(),
    )


@pytest.fixture
def admin_id(settings) -> str:
    profile_id, _ = asyncio.run(
        provision_admin(settings.db, ADMIN_EMAIL, first_name="Grace", last_name="Hopper")
    )
    return profile_id


@pytest.fixture
def email_provider() -> FakeEmailProvider:
    return FakeEmailProvider()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(WEDNESDAY)


@pytest.fixture
def client(settings, admin_id, email_provider, clock):
    app = create_app(settings, email_provider=email_provider, clock=clock)
    with TestClient(app) as c:
        yield c


def sign_in(client: TestClient, email_provider: FakeEmailProvider, email: str) -> dict:
    """Run the OTP flow for *email* and return Bearer headers for the session.

    The session cookie is dropped from the client so each test chooses its
    identity explicitly through the returned headers.
    """
    resp = client.post("/api/otp", json={"email": email})
    assert resp.status_code == 200, resp.text
    resp = client.post(
        "/api/auth/signin",
        json={"identifier": email, "code": email_provider.last_code(email), "type": "email"},
    )
    assert resp.status_code == 200, resp.text
    token = resp.cookies["session_token"]
    client.cookies.clear()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client, email_provider) -> dict:
    return sign_in(client, email_provider, ADMIN_EMAIL)


@pytest.fixture
def member_headers(client, email_provider, admin_headers) -> dict:
    """A signed-in non-admin profile created through the admin API."""
    resp = client.post(
        "/api/profiles",
        json={"email": "ruth@example.com", "firstName": "Ruth", "lastName": "Smith"},
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    return sign_in(client, email_provider, "ruth@example.com")


@pytest.fixture
def login(client, email_provider):
    """``login(email)`` signs *email* in and returns its Bearer headers."""
    return lambda email: sign_in(client, email_provider, email)
