"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

DATABASE_URL is the only required value. Everything else has a default
suitable for local development; production deployments set JWT_SECRET,
RESEND_API_KEY and COOKIE_SECURE explicitly.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False
    # Run metadata.create_all() on startup (no migration tool in this project)
    db_create_tables: bool = True


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    jwt_secret: str = ""
    jwt_issuer: str = "churchinkomoka"
    jwt_audience: str = "churchinkomoka.admin"
    session_ttl_seconds: int = 2592000
    session_cookie_name: str = "session_token"
    cookie_secure: bool = True


class OtpSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    otp_length: int = 6
    otp_expiry_seconds: int = 600


class EmailSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    resend_api_key: str = ""
    resend_from_email: str = "noreply@churchinkomoka.com"
    resend_from_name: str = "Church in Komoka"


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class SentrySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sentry_dsn: str = ""
    sentry_send_pii: bool = False
    sentry_traces_sample_rate: float = 0.1


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Core
    env: str = "development"
    app_url: str = "http://localhost:3000"
    app_name: str = "Church in Komoka"

    # "Today" for recurring events is the church's local calendar day
    site_timezone: str = "America/Toronto"

    cors_origins: list[str] = ["http://localhost:3000"]

    # OpenAPI docs URL (None disables the docs UI in production)
    docs_url: Optional[str] = "/docs"

    # Sub-configs (composed via model_validator below)
    db: Optional[DatabaseSettings] = None
    auth: Optional[AuthSettings] = None
    otp: Optional[OtpSettings] = None
    email: Optional[EmailSettings] = None
    logging: Optional[LoggingSettings] = None
    sentry: Optional[SentrySettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.db is None:
            self.db = DatabaseSettings()
        if self.auth is None:
            self.auth = AuthSettings()
        if self.otp is None:
            self.otp = OtpSettings()
        if self.email is None:
            self.email = EmailSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        if self.sentry is None:
            self.sentry = SentrySettings()

        if self.is_production and not self.auth.jwt_secret:
            raise ValueError("JWT_SECRET must be set in production")

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"
