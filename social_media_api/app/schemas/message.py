"""
Pydantic models for messages.

``time_posted_epoch`` is supplied by the client in milliseconds since the
epoch and stored verbatim.
"""

from typing import Optional

from pydantic import BaseModel, Field


# SQLite stores INTEGER as a signed 64-bit value.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


class MessageCreate(BaseModel):
    """Body of ``POST /messages``.

    ``posted_by`` and ``time_posted_epoch`` fall back to ``0`` when the
    client omits them; an unknown poster is then rejected by the foreign
    key on insert.
    """

    posted_by: int = Field(0, ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1])
    message_text: Optional[str] = Field(None, examples=["hi"])
    time_posted_epoch: int = Field(0, ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX, examples=[1669947792])


class MessageUpdate(BaseModel):
    """Body of ``PATCH /messages/{message_id}``."""

    message_text: Optional[str] = Field(None, examples=["hello"])


class MessageRead(BaseModel):
    """A message row as returned by the API."""

    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
