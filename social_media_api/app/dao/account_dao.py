"""
Data access for the ``account`` table.

Both operations report failure by returning ``None``: a rejected insert
(for example a duplicate username) and a failed lookup look the same to
the caller.  The error itself is logged.
"""

import logging
import sqlite3
from typing import Optional

from social_media_api.app.core.db import get_connection
from social_media_api.app.schemas.account import AccountRead


logger = logging.getLogger(__name__)


class AccountDAO:
    """Parameterized SQL against ``account``."""

    @classmethod
    def insert_account(cls, username: str, password: str) -> Optional[AccountRead]:
        """Insert a new account and return it with its generated id.

        Returns ``None`` if the statement fails, e.g. on the UNIQUE
        constraint of ``username``.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO account (username, password) VALUES (?, ?)",
                (username, password),
            )
            account_id = cursor.lastrowid
            conn.commit()
            return AccountRead(account_id=account_id, username=username, password=password)
        except sqlite3.Error:
            conn.rollback()
            logger.exception("Failed to insert account %r", username)
            return None
        finally:
            conn.close()

    @classmethod
    def find_account(cls, username: str, password: str) -> Optional[AccountRead]:
        """Return the first account matching both credentials exactly."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE username = ? AND password = ?",
                (username, password),
            ).fetchone()
            if not row:
                return None
            return AccountRead(
                account_id=row["account_id"],
                username=row["username"],
                password=row["password"],
            )
        except sqlite3.Error:
            logger.exception("Failed to look up account %r", username)
            return None
        finally:
            conn.close()
