"""Persistence helpers for auth workflows."""

from __future__ import annotations

from catauth.core.config import Settings
from catauth.core.db import create_sqlite_connection

UserAuthRow = tuple[int, str, str]


def create_user(
    *,
    settings: Settings,
    username: str,
    email: str,
    password_hash: str,
    created_at: str,
    upload_token: str | None = None,
) -> int:
    """Insert a user and return its id."""
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        conn.execute("BEGIN")
        cursor = conn.execute(
            """
            INSERT INTO users (username, email, password_hash, upload_token, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (username, email, password_hash, upload_token, created_at),
        )
        user_id = int(cursor.lastrowid)
        conn.commit()
        return user_id
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def username_exists(*, settings: Settings, username: str) -> bool:
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        row = conn.execute("SELECT 1 FROM users WHERE username = ?", (username,)).fetchone()
        return row is not None
    finally:
        conn.close()


def email_exists(*, settings: Settings, email: str) -> bool:
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        row = conn.execute("SELECT 1 FROM users WHERE email = ?", (email,)).fetchone()
        return row is not None
    finally:
        conn.close()


def get_user_auth_row(*, settings: Settings, login: str) -> UserAuthRow | None:
    """Fetch (id, username, password_hash) by username or email."""
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        row = conn.execute(
            """
            SELECT id, username, password_hash
            FROM users
            WHERE username = ? OR email = ?
            ORDER BY username = ? DESC
            LIMIT 1
            """,
            (login, login.lower(), login),
        ).fetchone()
        if row is None:
            return None
        user_id, username, password_hash = row
        return (int(user_id), str(username), str(password_hash))
    finally:
        conn.close()


def get_user_id_by_upload_token(*, settings: Settings, upload_token: str) -> int | None:
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        row = conn.execute(
            "SELECT id FROM users WHERE upload_token = ?",
            (upload_token,),
        ).fetchone()
        return None if row is None else int(row[0])
    finally:
        conn.close()


def user_id_exists(*, settings: Settings, user_id: int) -> bool:
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        row = conn.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
        return row is not None
    finally:
        conn.close()


def delete_user(*, settings: Settings, user_id: int) -> bool:
    """Delete a user; return whether a row was removed."""
    conn = create_sqlite_connection(settings.catauth_sqlite_path)
    try:
        cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        conn.commit()
        return cursor.rowcount > 0
    finally:
        conn.close()
