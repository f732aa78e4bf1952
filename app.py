"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Callable, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import AppSettings
from errors import register_error_handlers
from infrastructure.database import create_engine, create_session_factory, create_tables
from infrastructure.email.protocol import EmailProvider
from infrastructure.email.resend import ResendProvider
from infrastructure.http_client import HttpClient
from routes.auth_routes import router as auth_router
from routes.event_routes import router as event_router
from routes.health_routes import router as health_router
from routes.profile_routes import router as profile_router
from routes.retreat_routes import router as retreat_router
from routes.sermon_routes import router as sermon_router
from shared.datetime_utils import utcnow
from shared.log_context import setup_logging_middleware
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    email_provider: Optional[EmailProvider] = None,
    clock: Callable[[], datetime] = utcnow,
) -> FastAPI:
    """Create and return a fully configured FastAPI application.

    ``email_provider`` and ``clock`` replace the Resend provider and the
    wall clock; tests use them to capture codes and pin "today".
    """
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.logging.log_level, settings.logging.log_format, settings.env)

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            send_default_pii=settings.sentry.sentry_send_pii,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
            environment=settings.env,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        engine = create_engine(settings.db)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.settings = settings
        app.state.clock = clock

        if settings.db.db_create_tables:
            await create_tables(engine)

        http_client: Optional[HttpClient] = None
        if email_provider is not None:
            app.state.email_provider = email_provider
        else:
            http_client = HttpClient(timeout=10.0)
            app.state.email_provider = ResendProvider(
                settings.email, http_client, app_url=settings.app_url
            )
        if not app.state.email_provider.is_configured:
            log.warning("email_provider_not_configured")

        log.info("app_started", env=settings.env, site_timezone=settings.site_timezone)
        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        if http_client is not None:
            await http_client.aclose()
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    # The admin panel sends the session cookie cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_logging_middleware(app)

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(event_router)
    app.include_router(sermon_router)
    app.include_router(retreat_router)
    app.include_router(profile_router)

    return app
