"""HTTP helpers for unified auth errors."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from fastapi import HTTPException
from fastapi import Request
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from catauth.server.auth.errors import RegistrationRejectedError


def api_error(*, code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a unified API error payload."""
    return {"code": code, "message": message, "detail": detail or {}}


async def handle_http_exception(_: Request, exc: HTTPException) -> JSONResponse:
    """Unify HTTP errors to {code,message,detail} payload."""
    if isinstance(exc.detail, dict) and {"code", "message", "detail"} <= set(exc.detail):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=exc.headers,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=api_error(
            code="HTTP_ERROR",
            message=str(exc.detail),
            detail={},
        ),
        headers=exc.headers,
    )


async def handle_registration_rejected(_: Request, exc: RegistrationRejectedError) -> JSONResponse:
    """Registration errors use a flat {field: message} body."""
    return JSONResponse(status_code=422, content=exc.errors)
