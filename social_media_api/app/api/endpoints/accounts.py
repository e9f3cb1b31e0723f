"""
Account endpoints: registration, login and an account's messages.

Rejected requests are answered with an empty body.  A successful
registration or login returns the full account record, password
included.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from social_media_api.app.api.deps import RowId, get_account_service, get_message_service
from social_media_api.app.schemas.account import AccountCredentials
from social_media_api.app.schemas.message import MessageRead
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=None)
def register(
    body: AccountCredentials,
    service: AccountService = Depends(get_account_service),
):
    """Register a new account.

    The username must not be blank and the password must be at least
    four characters long.  A username that is already taken fails the
    insert and is rejected the same way.
    """
    if body.username is None or not body.username.strip():
        logger.info("Registration rejected: blank username")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    if body.password is None or len(body.password) < 4:
        logger.info("Registration rejected for %r: password too short", body.username)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    account = service.register_account(body.username, body.password)
    if account is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return account


@router.post("/login", response_model=None)
def login(
    body: AccountCredentials,
    service: AccountService = Depends(get_account_service),
):
    """Check credentials and return the matching account.

    Empty credentials answer 400; credentials that match no account
    answer 401.
    """
    if not body.username or not body.password:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    account = service.login(body.username, body.password)
    if account is None:
        logger.info("Login failed for %r", body.username)
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return account


@router.get("/accounts/{account_id}/messages", response_model=List[MessageRead])
def list_account_messages(
    account_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> List[MessageRead]:
    """List every message posted by an account (possibly none)."""
    return service.list_messages_by_account(account_id)
