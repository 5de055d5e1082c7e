"""Typed client for the Catrobat web server authentication endpoints."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any
from typing import TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError

from catauth.client.models import Credentials
from catauth.client.models import DeprecatedToken
from catauth.client.models import RegistrationRequest
from catauth.client.models import TokenResponse
from catauth.client.response import ApiResponse
from catauth.core.config import Settings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

AUTHENTICATION_PATH = "authentication"
UPGRADE_PATH = "authentication/upgrade"
USER_PATH = "user"


class WebServiceUnavailableError(RuntimeError):
    """Raised when a request cannot be completed at the transport level."""


def bearer_headers(token: str | None) -> dict[str, str]:
    """Build Bearer auth headers; no header at all when there is no token."""
    if token is None:
        return {}
    return {"Authorization": f"Bearer {token}"}


def _require(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


class AuthClient:
    """Blocking wrapper around the remote authentication API.

    Every operation performs exactly one HTTP exchange. Non-2xx status codes
    are returned as :class:`ApiResponse` values with the raw error body;
    only transport failures raise.
    """

    def __init__(self, http_client: httpx.Client, *, owns_client: bool = False) -> None:
        self._http = http_client
        self._owns_client = owns_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthClient":
        """Build a client that talks to ``settings.catauth_base_url``."""
        http_client = httpx.Client(
            base_url=f"{settings.catauth_base_url}/",
            timeout=settings.catauth_timeout_seconds,
            headers={"Accept": "application/json"},
        )
        return cls(http_client, owns_client=True)

    def login(self, bearer: str | None, credentials: Credentials) -> ApiResponse[TokenResponse]:
        """Exchange username/password for a fresh token."""
        _require(credentials, "credentials")
        return self._send(
            "POST",
            AUTHENTICATION_PATH,
            token=bearer,
            payload=credentials.model_dump(),
            body_model=TokenResponse,
        )

    def check_token(self, bearer: str | None) -> ApiResponse[None]:
        """Ask the server whether ``bearer`` is still valid."""
        return self._send("GET", AUTHENTICATION_PATH, token=bearer)

    def register(
        self,
        bearer: str | None,
        request: RegistrationRequest,
    ) -> ApiResponse[TokenResponse]:
        """Create an account; a 422 error body names the rejected fields."""
        _require(request, "request")
        return self._send(
            "POST",
            USER_PATH,
            token=bearer,
            payload=request.model_dump(),
            body_model=TokenResponse,
        )

    def upgrade_token(self, deprecated: DeprecatedToken) -> ApiResponse[TokenResponse]:
        """Convert a legacy upload token into a current token."""
        _require(deprecated, "deprecated")
        return self._send(
            "POST",
            UPGRADE_PATH,
            token=None,
            payload=deprecated.model_dump(by_alias=True),
            body_model=TokenResponse,
        )

    def delete_user(self, bearer: str | None) -> ApiResponse[None]:
        """Delete the account owning ``bearer``."""
        return self._send("DELETE", USER_PATH, token=bearer)

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "AuthClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _send(
        self,
        method: str,
        path: str,
        *,
        token: str | None,
        payload: dict[str, Any] | None = None,
        body_model: type[M] | None = None,
    ) -> ApiResponse[Any]:
        try:
            response = self._http.request(
                method,
                path,
                json=payload,
                headers=bearer_headers(token),
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise WebServiceUnavailableError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if not response.is_success:
            return ApiResponse(status_code=response.status_code, error_body=response.text)

        return ApiResponse(
            status_code=response.status_code,
            body=_decode_body(response, body_model),
        )


def _decode_body(response: httpx.Response, body_model: type[M] | None) -> M | None:
    if body_model is None or not response.content:
        return None
    try:
        return body_model.model_validate_json(response.content)
    except ValidationError:
        logger.warning("undecodable %s body for status %s", body_model.__name__, response.status_code)
        return None
