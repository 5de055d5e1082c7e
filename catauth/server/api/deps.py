"""Dependency helpers shared by API routers."""

from __future__ import annotations

from fastapi import Header

from catauth.server.auth.errors import raise_token_invalid


def require_bearer_token(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> str:
    """Read the raw Bearer token from the Authorization header."""
    if authorization is None:
        raise_token_invalid()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise_token_invalid()
    return token
