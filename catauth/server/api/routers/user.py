"""User account REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Response

import catauth.server.runtime as runtime
from catauth.client.models import RegistrationRequest
from catauth.server.api.deps import require_bearer_token
from catauth.server.auth.service import delete_account
from catauth.server.auth.service import register_user

router = APIRouter()


@router.post("/api/user", status_code=201)
def register(payload: RegistrationRequest) -> dict[str, str]:
    return register_user(settings=runtime.settings, payload=payload)


@router.delete("/api/user", status_code=204)
def delete(token: str = Depends(require_bearer_token)) -> Response:
    delete_account(settings=runtime.settings, access_token=token)
    return Response(status_code=204)
