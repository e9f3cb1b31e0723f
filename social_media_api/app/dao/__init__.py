"""
Data access objects.

One class per table.  Each method opens a connection, executes a single
parameterized statement and maps the result to a schema object.
"""

from .account_dao import AccountDAO
from .message_dao import MessageDAO

__all__ = ["AccountDAO", "MessageDAO"]
