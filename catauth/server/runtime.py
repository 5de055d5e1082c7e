"""Process-wide runtime state shared by the server's request handlers."""

from __future__ import annotations

from catauth.core.config import Settings
from catauth.core.config import load_settings
from catauth.server.auth.service import startup_auth_schema

settings = load_settings()


def startup() -> None:
    """Reload settings from the environment and ensure the auth schema exists."""
    global settings
    settings = load_settings()
    startup_auth_schema(settings)


__all__ = [
    "Settings",
    "settings",
    "startup",
]
