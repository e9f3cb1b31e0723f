"""Tests for the ``requests`` based API client."""

import json

import pytest
import requests

from social_media_client import SocialMediaAPI


class FakeSession:
    """Records requests and replays canned ``requests.Response`` objects."""

    def __init__(self, status_code=200, body=b""):
        self.status_code = status_code
        self.body = body
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        response = requests.Response()
        response.status_code = self.status_code
        response._content = self.body
        response.url = url
        response.reason = "test"
        return response


class FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def make_client(session):
    return SocialMediaAPI(base_url="http://api.test/", session=session, timeout=3)


def test_register_posts_credentials():
    account = {"account_id": 1, "username": "sam", "password": "pass"}
    session = FakeSession(body=json.dumps(account).encode())

    data, error = make_client(session).register("sam", "pass")

    assert (data, error) == (account, None)
    assert session.calls == [
        {
            "method": "POST",
            "url": "http://api.test/register",
            "json": {"username": "sam", "password": "pass"},
            "timeout": 3,
        }
    ]


def test_empty_body_means_no_data_and_no_error():
    data, error = make_client(FakeSession()).get_message(9)

    assert data is None
    assert error is None


def test_http_error_is_reported():
    data, error = make_client(FakeSession(status_code=401)).login("sam", "bad")

    assert data is None
    assert error["status_code"] == 401


def test_connection_error_is_reported():
    messages, error = make_client(FailingSession()).list_messages()

    assert messages == []
    assert error == {"status_code": None, "message": "connection refused"}


@pytest.mark.parametrize(
    "call, method, path, payload",
    [
        (lambda c: c.create_message(1, "hi", 1000), "POST", "/messages",
         {"posted_by": 1, "message_text": "hi", "time_posted_epoch": 1000}),
        (lambda c: c.update_message(3, "hello"), "PATCH", "/messages/3", {"message_text": "hello"}),
        (lambda c: c.delete_message(3), "DELETE", "/messages/3", None),
        (lambda c: c.list_account_messages(2), "GET", "/accounts/2/messages", None),
    ],
)
def test_operations_hit_expected_routes(call, method, path, payload):
    session = FakeSession(body=b"[]" if method == "GET" else b"{}")

    call(make_client(session))

    assert session.calls[0]["method"] == method
    assert session.calls[0]["url"] == f"http://api.test{path}"
    assert session.calls[0]["json"] == payload
