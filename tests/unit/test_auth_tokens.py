"""Access token and password hashing tests."""

from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone

import jwt
import pytest

from catauth.core.password import hash_password
from catauth.core.password import verify_password
from catauth.core.tokens import AccessTokenExpiredError
from catauth.core.tokens import AccessTokenInvalidError
from catauth.core.tokens import create_access_token
from catauth.core.tokens import decode_access_token
from catauth.core.tokens import user_id_from_payload

SECRET = "unit-test-secret-key-32-bytes-minimum"
NOW = datetime(2026, 10, 19, 0, 0, tzinfo=timezone.utc)


def test_access_jwt_contains_sub_and_exp() -> None:
    """Input: user_id=1 token in valid window -> Output: payload includes sub/exp."""
    token = create_access_token(user_id=1, secret=SECRET, now=NOW, expires_in_seconds=60)

    payload = decode_access_token(token, secret=SECRET, now=NOW + timedelta(seconds=30))

    assert payload["sub"] == "1"
    assert isinstance(payload["exp"], int)
    assert user_id_from_payload(payload) == 1


def test_access_jwt_expired_token_is_rejected() -> None:
    """Input: token after exp -> Output: raises AccessTokenExpiredError."""
    token = create_access_token(user_id=1, secret=SECRET, now=NOW, expires_in_seconds=1)

    with pytest.raises(AccessTokenExpiredError):
        decode_access_token(token, secret=SECRET, now=NOW + timedelta(seconds=2))


def test_access_jwt_signed_with_other_secret_is_invalid() -> None:
    token = create_access_token(
        user_id=1,
        secret="another-secret-key-also-32-bytes-long",
        now=NOW,
        expires_in_seconds=60,
    )

    with pytest.raises(AccessTokenInvalidError):
        decode_access_token(token, secret=SECRET, now=NOW)


def test_payload_without_numeric_sub_is_invalid() -> None:
    token = jwt.encode({"sub": "abc", "exp": int((NOW + timedelta(minutes=1)).timestamp())}, SECRET)
    payload = decode_access_token(token, secret=SECRET, now=NOW)

    with pytest.raises(AccessTokenInvalidError):
        user_id_from_payload(payload)


def test_hash_is_not_plaintext_and_verifies() -> None:
    hashed = hash_password("catroweb")

    assert hashed != "catroweb"
    assert verify_password("catroweb", hashed) is True
    assert verify_password("WrongPassword", hashed) is False


def test_unknown_hash_format_never_matches() -> None:
    assert verify_password("catroweb", "not-a-hash") is False
