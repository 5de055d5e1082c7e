"""Persistent key-value preferences backed by SQLite."""

from __future__ import annotations

from pathlib import Path

from catauth.core.constants import TOKEN
from catauth.core.db import create_sqlite_connection

CREATE_PREFERENCES_SQL = """
CREATE TABLE IF NOT EXISTS preferences (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class PreferenceStore:
    """String preferences that survive process restarts."""

    def __init__(self, path: str | Path) -> None:
        self._path = str(path)
        conn = create_sqlite_connection(self._path)
        try:
            conn.executescript(CREATE_PREFERENCES_SQL)
            conn.commit()
        finally:
            conn.close()

    def get_string(self, key: str, default: str | None = None) -> str | None:
        conn = create_sqlite_connection(self._path)
        try:
            row = conn.execute("SELECT value FROM preferences WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        if row is None:
            return default
        return str(row[0])

    def put_string(self, key: str, value: str) -> None:
        conn = create_sqlite_connection(self._path)
        try:
            conn.execute(
                """
                INSERT INTO preferences (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def remove(self, key: str) -> None:
        """Delete one key; missing keys are ignored."""
        conn = create_sqlite_connection(self._path)
        try:
            conn.execute("DELETE FROM preferences WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def contains(self, key: str) -> bool:
        return self.get_string(key) is not None


def saved_token(store: PreferenceStore) -> str | None:
    """Return the persisted bearer token, or ``None`` when the user never logged in."""
    return store.get_string(TOKEN)
