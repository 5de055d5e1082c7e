"""SQLite connection helpers shared by the preference store and fake server."""

from __future__ import annotations

import sqlite3
from pathlib import Path


def create_sqlite_connection(path: str | Path) -> sqlite3.Connection:
    """Open a SQLite database, creating parent folders and enabling foreign keys."""
    db_path = Path(path)
    if str(db_path) != ":memory:":
        db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA foreign_keys=ON")
    return conn
