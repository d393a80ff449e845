"""Opening the task store and bringing its schema up to date."""

from __future__ import annotations

import os
import sqlite3

TABLE_NAME = "tasks"

_CREATE_TABLE = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL DEFAULT 0,
    title TEXT NOT NULL DEFAULT '',
    description TEXT NOT NULL DEFAULT '',
    is_done INTEGER NOT NULL DEFAULT 0
)
"""

_COLUMNS = {
    "user_id": "INTEGER NOT NULL DEFAULT 0",
    "title": "TEXT NOT NULL DEFAULT ''",
    "description": "TEXT NOT NULL DEFAULT ''",
    "is_done": "INTEGER NOT NULL DEFAULT 0",
}


class DatabaseError(Exception):
    """Raised when the store cannot be opened or migrated."""


def _migrate(connection: sqlite3.Connection) -> None:
    with connection:
        connection.execute(_CREATE_TABLE)
        existing = {row[1] for row in connection.execute(f"PRAGMA table_info({TABLE_NAME})")}
        for name, definition in _COLUMNS.items():
            if name not in existing:
                connection.execute(f"ALTER TABLE {TABLE_NAME} ADD COLUMN {name} {definition}")


def init_db(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database at *path* and make sure the tasks table is current."""
    try:
        connection = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise DatabaseError(f"failed to connect to database: {exc}") from exc
    try:
        _migrate(connection)
    except sqlite3.Error as exc:
        connection.close()
        raise DatabaseError(f"failed to auto migrate: {exc}") from exc
    return connection