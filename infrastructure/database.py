"""
Async SQLAlchemy engine and session factory.

create_app() builds one engine per process in its lifespan and stores the
session factory on app.state; dependencies.get_session opens one AsyncSession
per request from it. Nothing here is a module-level singleton, so tests can
point the app at an in-memory SQLite database.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event as sa_event
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from config import DatabaseSettings
from schemas.models import event, otp, profile, retreat, sermon  # noqa: F401  (register tables)
from schemas.models.base import Base
from shared.logging import get_logger

log = get_logger(__name__)


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Create the async engine for DATABASE_URL.

    SQLite URLs (tests, local tinkering) share a single connection so an
    in-memory database survives across sessions, and have foreign keys
    switched on to match PostgreSQL.
    """
    kwargs: dict[str, Any] = {"echo": settings.db_echo}
    if settings.database_url.startswith("sqlite"):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["max_overflow"] = settings.db_max_overflow
        kwargs["pool_pre_ping"] = True
    engine = create_async_engine(settings.database_url, **kwargs)
    if settings.database_url.startswith("sqlite"):
        sa_event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False so handlers can serialize rows after commit
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create any missing tables (idempotent)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("database_tables_ensured", tables=sorted(Base.metadata.tables))


async def ping(engine: AsyncEngine) -> None:
    """Round-trip a trivial query; raises on failure."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
