"""JWT access token helpers."""

from __future__ import annotations

import secrets
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any

import jwt

ALGORITHM = "HS256"


class AccessTokenError(ValueError):
    """Base access token error."""


class AccessTokenInvalidError(AccessTokenError):
    """Raised when an access token cannot be decoded or is malformed."""


class AccessTokenExpiredError(AccessTokenError):
    """Raised when an access token is expired."""


def create_access_token(*, user_id: int, secret: str, now: datetime, expires_in_seconds: int) -> str:
    """Create a JWT carrying sub, iat, exp and a unique jti."""
    exp = int((now + timedelta(seconds=expires_in_seconds)).timestamp())
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": exp,
        "jti": secrets.token_hex(8),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, *, secret: str, now: datetime) -> dict[str, Any]:
    """Decode and validate an access token against ``now``."""
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"verify_exp": False, "verify_iat": False},
        )
    except jwt.InvalidTokenError as exc:
        raise AccessTokenInvalidError("invalid access token") from exc

    exp = payload.get("exp")
    if not isinstance(exp, int):
        raise AccessTokenInvalidError("missing or invalid exp")

    now_ts = int(now.astimezone(timezone.utc).timestamp())
    if now_ts >= exp:
        raise AccessTokenExpiredError("access token expired")

    return payload


def user_id_from_payload(payload: dict[str, Any]) -> int:
    try:
        return int(str(payload.get("sub")))
    except (TypeError, ValueError) as exc:
        raise AccessTokenInvalidError("missing or invalid sub") from exc
