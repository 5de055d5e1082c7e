"""Session/token issuance for auth endpoints."""

from __future__ import annotations

import secrets
from datetime import datetime
from datetime import timezone

from catauth.core.config import Settings
from catauth.core.tokens import create_access_token


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def issue_auth_session(*, settings: Settings, user_id: int) -> dict[str, str]:
    """Create an access token plus an opaque refresh token for the response body."""
    access_token = create_access_token(
        user_id=user_id,
        secret=settings.catauth_jwt_secret,
        now=utc_now(),
        expires_in_seconds=settings.catauth_access_token_expire_seconds,
    )
    return {"token": access_token, "refresh_token": secrets.token_urlsafe(32)}
