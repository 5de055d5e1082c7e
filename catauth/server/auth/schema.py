"""Schema bootstrap for auth tables."""

from __future__ import annotations

from catauth.core.config import Settings
from catauth.core.db import create_sqlite_connection


CREATE_AUTH_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    username TEXT NOT NULL UNIQUE,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    upload_token TEXT NULL UNIQUE,
    created_at TEXT NOT NULL
);
"""


def init_auth_schema(settings: Settings) -> None:
    """Ensure auth tables/indexes exist."""
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        conn.executescript(CREATE_AUTH_SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
