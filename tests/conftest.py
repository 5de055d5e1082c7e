"""Shared fixtures and the opt-in switch for tests that need the real backend."""

from __future__ import annotations

import time
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from catauth.client.web_service import AuthClient
from catauth.storage.preferences import PreferenceStore

TEST_JWT_SECRET = "catauth-test-secret-key-32-bytes-minimum"
LEGACY_UPLOAD_TOKEN = "0123456789abcdef0123456789abcdef"
OUTGOING_NETWORK_OPTION = "--run-outgoing-network"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        OUTGOING_NETWORK_OPTION,
        action="store_true",
        default=False,
        help="run tests marked outgoing_network against CATAUTH_BASE_URL",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "outgoing_network: talks to a real, shared backend; needs " + OUTGOING_NETWORK_OPTION,
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption(OUTGOING_NETWORK_OPTION):
        return
    skip_outgoing = pytest.mark.skip(reason=f"needs {OUTGOING_NETWORK_OPTION}")
    for item in items:
        if "outgoing_network" in item.keywords:
            item.add_marker(skip_outgoing)


@pytest.fixture
def new_user_name() -> str:
    """Timestamped username that does not collide with earlier runs."""
    return f"APIUser{time.time_ns() // 1_000_000}"


@pytest.fixture
def preferences(tmp_path: Path) -> PreferenceStore:
    """Empty preference store: no token has been saved yet."""
    return PreferenceStore(tmp_path / "preferences.sqlite3")


@pytest.fixture
def server_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the fake server at a fresh database for one test."""
    db_path = tmp_path / "catauth_server.sqlite3"
    monkeypatch.setenv("CATAUTH_SQLITE_PATH", str(db_path))
    monkeypatch.setenv("CATAUTH_JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("CATAUTH_SEED_UPLOAD_TOKEN", LEGACY_UPLOAD_TOKEN)
    return db_path


@pytest.fixture
def server_client(server_env: Path) -> Generator[TestClient, None, None]:
    """In-process fake server; entering the client runs the startup hook."""
    from catauth.server.main import app

    with TestClient(app, base_url="http://testserver/api") as client:
        yield client


@pytest.fixture
def in_process_web_service(server_client: TestClient) -> AuthClient:
    return AuthClient(server_client)
