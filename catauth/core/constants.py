"""Well-known status codes and preference keys of the Catrobat web API."""

from __future__ import annotations

STATUS_CODE_INVALID_CREDENTIALS = 401

SERVER_RESPONSE_TOKEN_OK = 200
SERVER_RESPONSE_REGISTER_OK = 201
SERVER_RESPONSE_USER_DELETED = 204
SERVER_RESPONSE_INVALID_UPLOAD_TOKEN = 401
SERVER_RESPONSE_REGISTER_UNPROCESSABLE_ENTITY = 422

# Preference keys
TOKEN = "token"
USERNAME = "username"
EMAIL = "email"
