"""
Top‑level router of the API.

The routes live at the root of the URL space (``/register``,
``/messages``, ``/accounts/{account_id}/messages``), so the domain
routers are included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages


router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, tags=["messages"])
