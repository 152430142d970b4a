"""
Integration tests for profile sync and forced sign-out.

Both operations acknowledge with status 200 whether or not the account
resolves to a user; only the log line differs.
"""

import logging
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from authlink import AdapterAccount, AdapterSession, AdapterUser, NotFoundError

pytestmark = pytest.mark.asyncio

EXPIRES = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def linked_user(client):
    user = await client.users.resolve_or_create(
        AdapterUser(id="test-user-id", email="test@example.com", image="old-avatar.jpg")
    )
    await client.accounts.link(
        AdapterAccount(
            user_id="test-user-id",
            type="oauth",
            provider="google",
            provider_account_id="123",
        )
    )
    return user


@pytest.fixture(autouse=True)
def capture_info(caplog):
    caplog.set_level(logging.INFO, logger="authlink")


class TestSafeUpdateUser:
    """Test background profile sync."""

    async def test_updates_linked_user(self, client, linked_user, caplog):
        result = await client.safe_update_user(
            "google", "123", {"image": "new-avatar.jpg", "email": "new@example.com"}
        )

        assert result.status == 200
        assert "updating user" in caplog.text
        user = await client.users.get_by_id("test-user-id")
        assert user.image == "new-avatar.jpg"
        assert user.email == "new@example.com"

    async def test_missing_user_is_not_an_error(self, client, caplog):
        result = await client.safe_update_user("google", "nonexistent", {"image": "new-avatar.jpg"})

        assert result.status == 200
        assert any(
            r.levelno == logging.WARNING and "no user was found" in r.getMessage()
            for r in caplog.records
        )

    async def test_user_deleted_during_update(self, client, linked_user, monkeypatch, caplog):
        monkeypatch.setattr(
            client.users, "update", AsyncMock(side_effect=NotFoundError("User not found"))
        )

        result = await client.safe_update_user("google", "123", {"name": "Late"})

        assert result.status == 200
        assert "no user was found" in caplog.text

    async def test_stored_column_names(self, client, linked_user):
        result = await client.safe_update_user(
            "google", "123", {"avatar": "new-avatar.jpg", "email": "new@example.com"}
        )

        assert result.status == 200
        user = await client.users.get_by_id("test-user-id")
        assert user.image == "new-avatar.jpg"
        assert user.email == "new@example.com"

    async def test_full_name_and_verified_at_columns(self, client, linked_user):
        verified = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)

        result = await client.safe_update_user(
            "google", "123", {"full_name": "Test User", "email_verified_at": verified}
        )

        assert result.status == 200
        user = await client.users.get_by_id("test-user-id")
        assert user.name == "Test User"
        assert user.email_verified == verified

    async def test_unknown_fields_are_dropped(self, client, linked_user, caplog):
        result = await client.safe_update_user(
            "google", "123", {"nickname": "tester", "id": "hijack", "image": "new-avatar.jpg"}
        )

        assert result.status == 200
        assert any(
            r.levelno == logging.WARNING and "ignoring unknown fields" in r.getMessage()
            for r in caplog.records
        )
        user = await client.users.get_by_id("test-user-id")
        assert user.image == "new-avatar.jpg"
        assert await client.users.get_by_id("hijack") is None


class TestSafeSignOutUser:
    """Test administrative sign-out."""

    async def test_deletes_all_sessions(self, client, linked_user, caplog):
        await client.sessions.create(AdapterSession("tok-1", "test-user-id", EXPIRES))
        await client.sessions.create(AdapterSession("tok-2", "test-user-id", EXPIRES))

        result = await client.safe_sign_out_user("google", "123")

        assert result.status == 200
        assert "Signing out user" in caplog.text
        assert await client.sessions.get_with_user("tok-1") is None
        assert await client.sessions.get_with_user("tok-2") is None
        # accounts survive a sign-out
        assert await client.accounts.get_account("123", "google") is not None

    async def test_missing_user_is_not_an_error(self, client, caplog):
        result = await client.safe_sign_out_user("google", "nonexistent")

        assert result.status == 200
        assert result.to_dict()["status"] == 200
        assert "no user was found" in caplog.text
