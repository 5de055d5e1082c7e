"""Authentication scenarios against the fake server running in a uvicorn process."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import httpx
import pytest

from catauth.client.web_service import AuthClient
from catauth.client.web_service import WebServiceUnavailableError
from catauth.core.config import Settings
from tests.conftest import TEST_JWT_SECRET
from tests.integration.authentication_suite import AuthenticationSuite
from tests.integration.real_service.live_server import LiveServer
from tests.integration.real_service.live_server import run_live_server


@pytest.fixture
def live_server(tmp_path: Path) -> Generator[LiveServer, None, None]:
    """Start a real uvicorn process for one test case."""
    with run_live_server(
        tmp_path=tmp_path,
        db_filename="catauth_rs.sqlite3",
        jwt_secret=TEST_JWT_SECRET,
    ) as server:
        yield server


@pytest.fixture
def live_web_service(live_server: LiveServer) -> Generator[AuthClient, None, None]:
    settings = Settings(catauth_base_url=live_server.api_url, catauth_timeout_seconds=3)
    with AuthClient.from_settings(settings) as client:
        yield client


class TestRealServiceAuthentication(AuthenticationSuite):
    @pytest.fixture
    def web_service(self, live_web_service: AuthClient) -> AuthClient:
        return live_web_service


def test_unified_error_shape_on_failed_login(live_server: LiveServer) -> None:
    """Raw HTTP check: 401 bodies follow {code,message,detail}."""
    with httpx.Client(base_url=live_server.base_url, timeout=3, trust_env=False) as client:
        response = client.post(
            "/api/authentication",
            json={"username": "InvalidUser", "password": "catroweb"},
        )

    assert response.status_code == 401
    payload = response.json()
    assert {"code", "message", "detail"} <= set(payload)
    assert payload["code"] == "AUTH_INVALID_CREDENTIALS"


def test_unreachable_server_raises_transport_error(tmp_path: Path) -> None:
    """A stopped server surfaces as WebServiceUnavailableError, not a status code."""
    with run_live_server(
        tmp_path=tmp_path,
        db_filename="catauth_rs_stopped.sqlite3",
        jwt_secret=TEST_JWT_SECRET,
    ) as server:
        api_url = server.api_url

    settings = Settings(catauth_base_url=api_url, catauth_timeout_seconds=1)
    with AuthClient.from_settings(settings) as client:
        with pytest.raises(WebServiceUnavailableError):
            client.check_token("whatever")
