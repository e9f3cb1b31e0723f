"""
Business logic for accounts.

Registration and login are delegated to :class:`AccountDAO` unchanged.
Passwords are stored and compared in plain text.
"""

import logging
from typing import Optional, Type

from social_media_api.app.dao.account_dao import AccountDAO
from social_media_api.app.schemas.account import AccountRead


logger = logging.getLogger(__name__)


class AccountService:
    """Account registration and credential check."""

    def __init__(self, dao: Type[AccountDAO] = AccountDAO) -> None:
        self.dao = dao

    def register_account(self, username: str, password: str) -> Optional[AccountRead]:
        """Create an account.  Returns ``None`` if the insert failed."""
        account = self.dao.insert_account(username, password)
        if account is not None:
            logger.info("Registered account %s (%s)", account.account_id, username)
        return account

    def login(self, username: str, password: str) -> Optional[AccountRead]:
        """Return the account matching the credentials, or ``None``."""
        return self.dao.find_account(username, password)
