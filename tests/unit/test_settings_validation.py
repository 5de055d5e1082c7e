"""Configuration guard tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catauth.core.config import Settings
from catauth.core.config import load_settings


def test_defaults_point_at_public_server() -> None:
    settings = Settings()
    assert settings.catauth_base_url == "https://share.catrob.at/api"
    assert settings.catauth_seed_username == "catroweb"
    assert settings.catauth_seed_upload_token is None


def test_base_url_trailing_slash_is_stripped() -> None:
    """Input: base url ending in / -> Output: stored without it."""
    settings = Settings(catauth_base_url="http://localhost:8000/api/")
    assert settings.catauth_base_url == "http://localhost:8000/api"


def test_base_url_must_be_http() -> None:
    with pytest.raises(ValidationError):
        Settings(catauth_base_url="ftp://share.catrob.at/api")


def test_jwt_secret_requires_minimum_32_bytes() -> None:
    """Input: secret shorter than 32 bytes -> Output: settings validation fails."""
    with pytest.raises(ValidationError):
        Settings(catauth_jwt_secret="1234567890123456789012345678901")


def test_server_bind_defaults_and_port_range() -> None:
    settings = Settings()
    assert (settings.catauth_server_host, settings.catauth_server_port) == ("127.0.0.1", 8000)
    with pytest.raises(ValidationError):
        Settings(catauth_server_port=0)
    with pytest.raises(ValidationError):
        Settings(catauth_server_port=65536)


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(catauth_timeout_seconds=0)


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATAUTH_BASE_URL", "https://web-test.catrob.at/api")
    monkeypatch.setenv("CATAUTH_TIMEOUT_SECONDS", "2.5")

    settings = load_settings()

    assert settings.catauth_base_url == "https://web-test.catrob.at/api"
    assert settings.catauth_timeout_seconds == 2.5
