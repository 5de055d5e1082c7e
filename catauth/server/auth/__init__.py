"""Auth module for the fake identity server."""

from catauth.server.auth.http import handle_http_exception
from catauth.server.auth.http import handle_registration_rejected
from catauth.server.auth.service import delete_account
from catauth.server.auth.service import login_user
from catauth.server.auth.service import register_user
from catauth.server.auth.service import startup_auth_schema
from catauth.server.auth.service import upgrade_token

__all__ = [
    "delete_account",
    "handle_http_exception",
    "handle_registration_rejected",
    "login_user",
    "register_user",
    "startup_auth_schema",
    "upgrade_token",
]
