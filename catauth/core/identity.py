"""Username and email normalization/validation rules for registration."""

from __future__ import annotations

import unicodedata

import regex
from email_validator import EmailNotValidError
from email_validator import validate_email

MIN_USERNAME_GRAPHEMES = 3
MAX_USERNAME_GRAPHEMES = 180
_GRAPHEME_PATTERN = regex.compile(r"\X")


class IdentityValidationError(ValueError):
    """Raised when a username or email violates registration rules."""


def normalize_username(raw_username: str) -> str:
    """Trim and normalize username to NFC form."""
    return unicodedata.normalize("NFC", raw_username.strip())


def count_graphemes(value: str) -> int:
    """Count user-visible characters using grapheme clusters."""
    return len(_GRAPHEME_PATTERN.findall(value))


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_and_validate_username(raw_username: str) -> str:
    """Apply trim + NFC and validate length and shape."""
    username = normalize_username(raw_username)
    grapheme_count = count_graphemes(username)
    if grapheme_count < MIN_USERNAME_GRAPHEMES or grapheme_count > MAX_USERNAME_GRAPHEMES:
        raise IdentityValidationError(
            f"username length must be {MIN_USERNAME_GRAPHEMES}-{MAX_USERNAME_GRAPHEMES} characters"
        )
    if is_email(username):
        raise IdentityValidationError("username must not be an email address")
    return username


def normalize_and_validate_email(raw_email: str) -> str:
    """Trim, validate and lowercase an email address."""
    try:
        validated = validate_email(raw_email.strip(), check_deliverability=False)
    except EmailNotValidError as exc:
        raise IdentityValidationError("email address is not valid") from exc
    return validated.normalized.lower()
