"""
Message endpoints.

A lookup that finds nothing is not an error here: ``GET`` and ``DELETE``
on an unknown id answer 200 with an empty body.  Text is capped at 254
characters on both create and update, counted in UTF-16 code units as
most clients count them.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from social_media_api.app.api.deps import RowId, get_message_service
from social_media_api.app.schemas.message import MessageCreate, MessageRead, MessageUpdate
from social_media_api.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


def _text_length(text: str) -> int:
    # Characters outside the BMP (emoji) count as two.
    return len(text.encode("utf-16-le")) // 2


@router.post("/messages", response_model=None)
def create_message(
    body: MessageCreate,
    service: MessageService = Depends(get_message_service),
):
    """Post a new message.

    The text must not be blank and may be at most 254 characters.  The
    insert fails, and the request is rejected, if ``posted_by`` is not an
    existing account.
    """
    text = body.message_text
    if text is None or not text.strip() or _text_length(text) > 254:
        logger.debug("Message rejected: invalid text")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    message = service.create_message(body.posted_by, text, body.time_posted_epoch)
    if message is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return message


@router.get("/messages", response_model=List[MessageRead])
def list_messages(service: MessageService = Depends(get_message_service)) -> List[MessageRead]:
    """List all messages (possibly none)."""
    return service.list_messages()


@router.get("/messages/{message_id}", response_model=None)
def get_message(
    message_id: RowId,
    service: MessageService = Depends(get_message_service),
):
    """Retrieve one message; empty body if it does not exist."""
    message = service.get_message(message_id)
    if message is None:
        return Response(status_code=status.HTTP_200_OK)
    return message


@router.delete("/messages/{message_id}", response_model=None)
def delete_message(
    message_id: RowId,
    service: MessageService = Depends(get_message_service),
):
    """Delete a message and return it.

    Deleting an unknown id is a no‑op answered with 200 and an empty
    body, so repeating a delete is harmless.
    """
    existing = service.get_message(message_id)
    if existing is not None and service.delete_message(message_id):
        return existing
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/messages/{message_id}", response_model=None)
def update_message(
    message_id: RowId,
    body: MessageUpdate,
    service: MessageService = Depends(get_message_service),
):
    """Replace the text of a message and return the updated message.

    Rejected with 400 if the text is missing, blank or 255 characters or
    longer, or if no message has this id.
    """
    text = body.message_text
    if text is None or not text.strip() or _text_length(text) >= 255:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    if not service.update_message_text(message_id, text):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    updated = service.get_message(message_id)
    if updated is None:
        # Deleted by a concurrent request after the update.
        return Response(status_code=status.HTTP_200_OK)
    return updated
