"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests. Tests control config exclusively through monkeypatch.setenv().
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from schemas.models.event import Event, EventCategory


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture
def make_event():
    """Build a transient Event row; recurrence fields default to one-time."""

    def _make(**overrides) -> Event:
        values = dict(
            id=uuid.uuid4(),
            title="Lord's Day Meeting",
            category=EventCategory.SERVICE,
            location="Komoka Community Centre",
            start_date=None,
            end_date=None,
            time="10:00 AM - 11:30 AM",
            is_recurring=False,
            recurrence_pattern=None,
            recurrence_day_of_week=None,
            recurrence_day_of_month=None,
            recurrence_end_date=None,
            is_active=True,
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            updated_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )
        values.update(overrides)
        return Event(**values)

    return _make
