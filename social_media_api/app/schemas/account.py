"""
Pydantic models for account data.

The same credential payload is used for registration and login.  The
stored password is returned as is: this API has no notion of hashed
secrets or tokens.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    """Body of ``POST /register`` and ``POST /login``."""

    username: Optional[str] = Field(None, examples=["sam"])
    password: Optional[str] = Field(None, examples=["pass"])


class AccountRead(BaseModel):
    """An account row as returned by the API."""

    account_id: int
    username: str
    password: str

    model_config = {
        "from_attributes": True,
    }
