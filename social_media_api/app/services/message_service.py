"""
Business logic for messages.

Every method forwards to :class:`MessageDAO`.  Errors are not caught
here: a :class:`DataAccessError` raised by the DAO reaches the handler
unchanged, and sentinel results (``None``, ``False``, ``[]``) are passed
through as they are.
"""

import logging
from typing import List, Optional, Type

from social_media_api.app.dao.message_dao import MessageDAO
from social_media_api.app.schemas.message import MessageRead


logger = logging.getLogger(__name__)


class MessageService:
    """Service for posting, reading, editing and deleting messages."""

    def __init__(self, dao: Type[MessageDAO] = MessageDAO) -> None:
        self.dao = dao

    def create_message(self, posted_by: int, message_text: str, time_posted_epoch: int) -> Optional[MessageRead]:
        message = self.dao.insert_message(posted_by, message_text, time_posted_epoch)
        if message is not None:
            logger.info("Message %s posted by account %s", message.message_id, posted_by)
        return message

    def get_message(self, message_id: int) -> Optional[MessageRead]:
        return self.dao.get_message(message_id)

    def list_messages(self) -> List[MessageRead]:
        return self.dao.list_messages()

    def list_messages_by_account(self, account_id: int) -> List[MessageRead]:
        return self.dao.list_messages_by_account(account_id)

    def update_message_text(self, message_id: int, message_text: str) -> bool:
        updated = self.dao.update_message_text(message_id, message_text)
        if updated:
            logger.info("Message %s updated", message_id)
        return updated

    def delete_message(self, message_id: int) -> bool:
        deleted = self.dao.delete_message(message_id)
        if deleted:
            logger.info("Message %s deleted", message_id)
        return deleted
