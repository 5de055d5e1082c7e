"""Application settings for the auth client, fake server and tests."""

from __future__ import annotations

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings

DEV_JWT_SECRET = "catauth-dev-secret-please-change-in-production"
MIN_JWT_SECRET_BYTES = 32


class Settings(BaseSettings):
    """Typed settings loaded from environment variables or explicit kwargs."""

    catauth_base_url: str = "https://share.catrob.at/api"
    catauth_timeout_seconds: float = Field(default=10.0, gt=0)
    catauth_preferences_path: str = "catauth_preferences.sqlite3"

    catauth_server_host: str = "127.0.0.1"
    catauth_server_port: int = Field(default=8000, ge=1, le=65535)
    catauth_jwt_secret: str = DEV_JWT_SECRET
    catauth_access_token_expire_seconds: int = Field(default=3600, ge=1)
    catauth_sqlite_path: str = "catauth_server.sqlite3"

    catauth_seed_username: str = "catroweb"
    catauth_seed_email: str = "catroweb@localhost.at"
    catauth_seed_password: str = "catroweb"
    catauth_seed_upload_token: str | None = None

    @field_validator("catauth_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("CATAUTH_BASE_URL must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("catauth_jwt_secret")
    @classmethod
    def validate_jwt_secret_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) < MIN_JWT_SECRET_BYTES:
            raise ValueError(f"CATAUTH_JWT_SECRET must be at least {MIN_JWT_SECRET_BYTES} bytes")
        return value


def load_settings() -> Settings:
    """Load settings from process environment."""
    return Settings()
