"""Auth business logic for the fake identity server."""

from __future__ import annotations

import logging
import sqlite3

from catauth.client.models import Credentials
from catauth.client.models import DeprecatedToken
from catauth.client.models import RegistrationRequest
from catauth.core.config import Settings
from catauth.core.identity import IdentityValidationError
from catauth.core.identity import normalize_and_validate_email
from catauth.core.identity import normalize_and_validate_username
from catauth.core.identity import normalize_username
from catauth.core.password import MIN_PASSWORD_LENGTH
from catauth.core.password import hash_password
from catauth.core.password import verify_password
from catauth.core.tokens import AccessTokenExpiredError
from catauth.core.tokens import AccessTokenInvalidError
from catauth.core.tokens import decode_access_token
from catauth.core.tokens import user_id_from_payload
from catauth.server.auth.errors import RegistrationRejectedError
from catauth.server.auth.errors import raise_invalid_credentials
from catauth.server.auth.errors import raise_invalid_upload_token
from catauth.server.auth.errors import raise_token_expired
from catauth.server.auth.errors import raise_token_invalid
from catauth.server.auth.repository import create_user
from catauth.server.auth.repository import delete_user
from catauth.server.auth.repository import email_exists
from catauth.server.auth.repository import get_user_auth_row
from catauth.server.auth.repository import get_user_id_by_upload_token
from catauth.server.auth.repository import user_id_exists
from catauth.server.auth.repository import username_exists
from catauth.server.auth.schema import init_auth_schema
from catauth.server.auth.session import issue_auth_session
from catauth.server.auth.session import to_utc_iso
from catauth.server.auth.session import utc_now

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already in use"
USERNAME_TAKEN = "Username already in use"
PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
TERMS_NOT_ACCEPTED = "Terms of use must be accepted"


def startup_auth_schema(settings: Settings) -> None:
    """Ensure auth tables exist and the seed account is present."""
    init_auth_schema(settings)
    seed_account(settings)


def seed_account(settings: Settings) -> None:
    """Create the configured pre-existing account unless it is already there."""
    if not settings.catauth_seed_username:
        return
    if username_exists(settings=settings, username=settings.catauth_seed_username):
        return
    create_user(
        settings=settings,
        username=settings.catauth_seed_username,
        email=settings.catauth_seed_email.lower(),
        password_hash=hash_password(settings.catauth_seed_password),
        upload_token=settings.catauth_seed_upload_token,
        created_at=to_utc_iso(utc_now()),
    )
    logger.info("seeded account %s", settings.catauth_seed_username)


def _validate_registration(settings: Settings, payload: RegistrationRequest) -> tuple[str, str]:
    """Collect every field error before rejecting."""
    errors: dict[str, str] = {}
    username = email = ""

    try:
        email = normalize_and_validate_email(payload.email)
    except IdentityValidationError as exc:
        errors["email"] = str(exc)
    else:
        if email_exists(settings=settings, email=email):
            errors["email"] = EMAIL_TAKEN

    try:
        username = normalize_and_validate_username(payload.username)
    except IdentityValidationError as exc:
        errors["username"] = str(exc)
    else:
        if username_exists(settings=settings, username=username):
            errors["username"] = USERNAME_TAKEN

    if len(payload.password) < MIN_PASSWORD_LENGTH:
        errors["password"] = PASSWORD_TOO_SHORT
    if not payload.accepted_terms:
        errors["accepted_terms"] = TERMS_NOT_ACCEPTED

    if errors:
        raise RegistrationRejectedError(errors)
    return username, email


def register_user(*, settings: Settings, payload: RegistrationRequest) -> dict[str, str]:
    """Create a user and return a fresh token pair."""
    username, email = _validate_registration(settings, payload)

    try:
        user_id = create_user(
            settings=settings,
            username=username,
            email=email,
            password_hash=hash_password(payload.password),
            created_at=to_utc_iso(utc_now()),
        )
    except sqlite3.IntegrityError as exc:
        # Lost a race against a concurrent registration of the same identity.
        raise RegistrationRejectedError({"username": USERNAME_TAKEN, "email": EMAIL_TAKEN}) from exc

    logger.info("registered user %s (id=%s)", username, user_id)
    return issue_auth_session(settings=settings, user_id=user_id)


def login_user(*, settings: Settings, payload: Credentials) -> dict[str, str]:
    """Authenticate by username or email and issue a fresh token pair."""
    row = get_user_auth_row(settings=settings, login=normalize_username(payload.username))
    if row is None:
        raise_invalid_credentials()

    user_id, _, password_hash = row
    if not verify_password(payload.password, password_hash):
        raise_invalid_credentials()

    return issue_auth_session(settings=settings, user_id=user_id)


def authenticate(*, settings: Settings, access_token: str) -> int:
    """Return the user id owning a valid access token."""
    try:
        payload = decode_access_token(
            access_token,
            secret=settings.catauth_jwt_secret,
            now=utc_now(),
        )
        user_id = user_id_from_payload(payload)
    except AccessTokenExpiredError:
        raise_token_expired()
    except AccessTokenInvalidError:
        raise_token_invalid()

    if not user_id_exists(settings=settings, user_id=user_id):
        raise_token_invalid()
    return user_id


def upgrade_token(*, settings: Settings, payload: DeprecatedToken) -> dict[str, str]:
    """Trade a legacy upload token for a current token pair."""
    user_id = get_user_id_by_upload_token(settings=settings, upload_token=payload.value)
    if user_id is None:
        raise_invalid_upload_token()
    return issue_auth_session(settings=settings, user_id=user_id)


def delete_account(*, settings: Settings, access_token: str) -> None:
    """Delete the account owning ``access_token``."""
    user_id = authenticate(settings=settings, access_token=access_token)
    if not delete_user(settings=settings, user_id=user_id):
        raise_token_invalid()
    logger.info("deleted user id=%s", user_id)
