"""Authentication REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

import catauth.server.runtime as runtime
from catauth.client.models import Credentials
from catauth.client.models import DeprecatedToken
from catauth.server.api.deps import require_bearer_token
from catauth.server.auth.service import authenticate
from catauth.server.auth.service import login_user
from catauth.server.auth.service import upgrade_token

router = APIRouter()


@router.post("/api/authentication")
def login(payload: Credentials) -> dict[str, str]:
    """Authenticate user and issue a fresh token pair."""
    return login_user(settings=runtime.settings, payload=payload)


@router.get("/api/authentication")
def check_token(token: str = Depends(require_bearer_token)) -> dict[str, object]:
    """Return 200 while the presented token is valid."""
    authenticate(settings=runtime.settings, access_token=token)
    return {}


@router.post("/api/authentication/upgrade")
def upgrade(payload: DeprecatedToken) -> dict[str, str]:
    """Exchange a legacy upload token for a token pair."""
    return upgrade_token(settings=runtime.settings, payload=payload)
