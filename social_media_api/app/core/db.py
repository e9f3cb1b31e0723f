"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``) and creating the schema on application start
(``init_db``).  Every data‑access operation opens its own connection and
closes it when done; no connection is shared between requests.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


SCHEMA = """
CREATE TABLE IF NOT EXISTS account (
    account_id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS message (
    message_id INTEGER PRIMARY KEY AUTOINCREMENT,
    posted_by INTEGER NOT NULL,
    message_text TEXT NOT NULL,
    time_posted_epoch INTEGER,
    FOREIGN KEY(posted_by) REFERENCES account(account_id)
);

CREATE INDEX IF NOT EXISTS idx_message_posted_by ON message(posted_by);
"""


class DataAccessError(Exception):
    """Raised when a statement fails and the caller must be told so.

    Wraps the underlying ``sqlite3.Error`` (available as ``__cause__``).
    A missing row is never reported through this exception; lookups
    return ``None`` for that.
    """


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by name.
    Foreign keys are enforced, so a message must reference an existing
    account.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Create the ``account`` and ``message`` tables if they are missing."""
    with get_cursor() as cursor:
        cursor.executescript(SCHEMA)
