"""
FastAPI dependencies shared by the route handlers.

Services carry no per‑request state, so a new instance per request is
as good as a shared one.  Tests replace these providers through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Path

from social_media_api.app.schemas.message import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


# Path ids outside SQLite's INTEGER range are rejected before any query runs.
RowId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]


def get_account_service() -> AccountService:
    return AccountService()


def get_message_service() -> MessageService:
    return MessageService()
