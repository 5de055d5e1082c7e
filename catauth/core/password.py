"""Password hashing helpers for the fake identity server."""

from __future__ import annotations

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

_PASSWORD_CONTEXT = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

MIN_PASSWORD_LENGTH = 6


def hash_password(plain_password: str) -> str:
    return _PASSWORD_CONTEXT.hash(plain_password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Verify plaintext password; unknown hash formats never match."""
    try:
        return _PASSWORD_CONTEXT.verify(plain_password, password_hash)
    except (UnknownHashError, ValueError):
        return False
