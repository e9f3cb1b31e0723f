"""
Data access for the ``message`` table.

Failure handling differs per operation and callers rely on it:

* inserts return ``None``;
* deletes and updates return ``False``;
* list queries return an empty list;
* ``get_message`` raises :class:`DataAccessError`, so that a broken
  lookup is never mistaken for a missing row.

Every failure is logged before it is reported.
"""

import logging
import sqlite3
from typing import List, Optional

from social_media_api.app.core.db import DataAccessError, get_connection
from social_media_api.app.schemas.message import MessageRead


logger = logging.getLogger(__name__)

_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


def _row_to_message(row: sqlite3.Row) -> MessageRead:
    return MessageRead(
        message_id=row["message_id"],
        posted_by=row["posted_by"],
        message_text=row["message_text"],
        time_posted_epoch=row["time_posted_epoch"],
    )


class MessageDAO:
    """Parameterized SQL against ``message``."""

    @classmethod
    def insert_message(cls, posted_by: int, message_text: str, time_posted_epoch: int) -> Optional[MessageRead]:
        """Insert a message and return it with its generated id.

        Returns ``None`` when the insert is rejected, for instance when
        ``posted_by`` does not reference an existing account.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                (posted_by, message_text, time_posted_epoch),
            )
            message_id = cursor.lastrowid
            conn.commit()
            return MessageRead(
                message_id=message_id,
                posted_by=posted_by,
                message_text=message_text,
                time_posted_epoch=time_posted_epoch,
            )
        except sqlite3.Error:
            conn.rollback()
            logger.exception("Failed to insert message for account %s", posted_by)
            return None
        finally:
            conn.close()

    @classmethod
    def delete_message(cls, message_id: int) -> bool:
        """Delete a message; ``True`` iff exactly one row was removed."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
            conn.commit()
            return cursor.rowcount == 1
        except sqlite3.Error:
            conn.rollback()
            logger.exception("Failed to delete message %s", message_id)
            return False
        finally:
            conn.close()

    @classmethod
    def get_message(cls, message_id: int) -> Optional[MessageRead]:
        """Retrieve a single message by id, or ``None`` if it does not exist."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
            return _row_to_message(row) if row else None
        except sqlite3.Error as e:
            logger.exception("Failed to read message %s", message_id)
            raise DataAccessError(f"Error reading message {message_id}: {e}") from e
        finally:
            conn.close()

    @classmethod
    def list_messages(cls) -> List[MessageRead]:
        """Return all messages in storage order."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM message").fetchall()
            return [_row_to_message(row) for row in rows]
        except sqlite3.Error:
            logger.exception("Failed to list messages")
            return []
        finally:
            conn.close()

    @classmethod
    def update_message_text(cls, message_id: int, message_text: str) -> bool:
        """Replace the text of a message; ``True`` iff exactly one row changed."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE message SET message_text = ? WHERE message_id = ?",
                (message_text, message_id),
            )
            conn.commit()
            return cursor.rowcount == 1
        except sqlite3.Error:
            conn.rollback()
            logger.exception("Failed to update message %s", message_id)
            return False
        finally:
            conn.close()

    @classmethod
    def list_messages_by_account(cls, account_id: int) -> List[MessageRead]:
        """Return all messages whose ``posted_by`` equals ``account_id``."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ?",
                (account_id,),
            ).fetchall()
            return [_row_to_message(row) for row in rows]
        except sqlite3.Error:
            logger.exception("Failed to list messages for account %s", account_id)
            return []
        finally:
            conn.close()
