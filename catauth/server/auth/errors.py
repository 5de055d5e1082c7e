"""Auth-specific errors and HTTP error raisers."""

from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException

from catauth.server.auth.http import api_error


class RegistrationRejectedError(ValueError):
    """Raised when one or more registration fields are invalid or taken."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(", ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


def _unauthorized(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=api_error(code=code, message=message, detail={}),
        headers={"WWW-Authenticate": "Bearer"},
    )


def raise_invalid_credentials() -> NoReturn:
    """Raise unified invalid-credentials response."""
    raise _unauthorized("AUTH_INVALID_CREDENTIALS", "invalid username or password")


def raise_token_invalid() -> NoReturn:
    raise _unauthorized("AUTH_TOKEN_INVALID", "invalid access token")


def raise_token_expired() -> NoReturn:
    raise _unauthorized("AUTH_TOKEN_EXPIRED", "access token expired")


def raise_invalid_upload_token() -> NoReturn:
    """Raise when a deprecated upload token is unknown or no longer valid."""
    raise _unauthorized("AUTH_INVALID_UPLOAD_TOKEN", "upload token is invalid or expired")
