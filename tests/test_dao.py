"""Tests for the DAO classes against a real SQLite file."""

import sqlite3

import pytest

from social_media_api.app.core.db import DataAccessError, get_connection
from social_media_api.app.dao import AccountDAO, MessageDAO


@pytest.fixture
def account_id(db_path):
    return AccountDAO.insert_account("sam", "pass").account_id


def drop_message_table():
    conn = get_connection()
    try:
        conn.execute("DROP TABLE message")
        conn.commit()
    finally:
        conn.close()


class TestAccountDAO:
    def test_insert_then_find(self, db_path):
        created = AccountDAO.insert_account("sam", "pass")

        assert created.account_id == 1
        assert AccountDAO.find_account("sam", "pass") == created

    def test_find_requires_exact_match(self, db_path):
        AccountDAO.insert_account("sam", "pass")

        assert AccountDAO.find_account("sam", "PASS") is None
        assert AccountDAO.find_account("Sam", "pass") is None

    def test_duplicate_username_returns_none(self, db_path):
        AccountDAO.insert_account("sam", "pass")

        assert AccountDAO.insert_account("sam", "other") is None


class TestMessageDAO:
    def test_insert_and_get(self, account_id):
        created = MessageDAO.insert_message(account_id, "hi", 1000)

        assert created.message_id == 1
        assert MessageDAO.get_message(created.message_id) == created

    def test_insert_with_unknown_poster_returns_none(self, account_id):
        assert MessageDAO.insert_message(account_id + 1, "hi", 1000) is None

    def test_get_missing_returns_none(self, db_path):
        assert MessageDAO.get_message(1) is None

    def test_delete_reports_whether_a_row_was_removed(self, account_id):
        message = MessageDAO.insert_message(account_id, "hi", 1000)

        assert MessageDAO.delete_message(message.message_id) is True
        assert MessageDAO.delete_message(message.message_id) is False

    def test_update_reports_whether_a_row_changed(self, account_id):
        message = MessageDAO.insert_message(account_id, "hi", 1000)

        assert MessageDAO.update_message_text(message.message_id, "hello") is True
        assert MessageDAO.get_message(message.message_id).message_text == "hello"
        assert MessageDAO.update_message_text(999, "hello") is False

    def test_list_by_account(self, account_id):
        other_id = AccountDAO.insert_account("kim", "word").account_id
        MessageDAO.insert_message(account_id, "a", 1)
        MessageDAO.insert_message(other_id, "b", 2)
        MessageDAO.insert_message(account_id, "c", 3)

        assert [m.message_text for m in MessageDAO.list_messages_by_account(account_id)] == ["a", "c"]
        assert len(MessageDAO.list_messages()) == 3

    def test_get_raises_on_failure(self, db_path):
        drop_message_table()

        with pytest.raises(DataAccessError) as excinfo:
            MessageDAO.get_message(1)
        assert isinstance(excinfo.value.__cause__, sqlite3.Error)

    def test_other_operations_return_sentinels_on_failure(self, account_id):
        drop_message_table()

        assert MessageDAO.list_messages() == []
        assert MessageDAO.list_messages_by_account(account_id) == []
        assert MessageDAO.insert_message(account_id, "hi", 1) is None
        assert MessageDAO.update_message_text(1, "x") is False
        assert MessageDAO.delete_message(1) is False
