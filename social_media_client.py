"""Social media API client.

This module defines a small client wrapper around the HTTP surface of the
Social Media API.  It uses the ``requests`` library internally and exposes
one method per endpoint:

* :meth:`register` / :meth:`login` – create an account or check credentials.
* :meth:`create_message` – post a message.
* :meth:`list_messages` / :meth:`list_account_messages` – list messages.
* :meth:`get_message` – fetch a single message.
* :meth:`update_message` – replace a message's text.
* :meth:`delete_message` – delete a message.

Every method returns a tuple ``(data, error)``.  The server answers some
requests with 200 and an empty body (an unknown message id, for
example); in that case both ``data`` and ``error`` are ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class SocialMediaAPI:
    """Client for interacting with the social media API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/messages``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` is a dictionary with keys ``status_code`` and
            ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _request_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Result:
        """Register a new account and return it."""
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Result:
        """Check credentials.  A mismatch is reported as a 401 error."""
        return self._request("POST", "/login", json_body={"username": username, "password": password})

    def list_account_messages(self, account_id: int) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every message posted by ``account_id``."""
        return self._request_list(f"/accounts/{account_id}/messages")

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def create_message(self, posted_by: int, message_text: str, time_posted_epoch: int) -> Result:
        payload = {
            "posted_by": posted_by,
            "message_text": message_text,
            "time_posted_epoch": time_posted_epoch,
        }
        return self._request("POST", "/messages", json_body=payload)

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all messages.  The list is empty on failure."""
        return self._request_list("/messages")

    def get_message(self, message_id: int) -> Result:
        return self._request("GET", f"/messages/{message_id}")

    def update_message(self, message_id: int, message_text: str) -> Result:
        return self._request("PATCH", f"/messages/{message_id}", json_body={"message_text": message_text})

    def delete_message(self, message_id: int) -> Result:
        """Delete a message.  ``data`` is the deleted message, or ``None`` if it did not exist."""
        return self._request("DELETE", f"/messages/{message_id}")
