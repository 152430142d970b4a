"""
Integration tests for find-or-create and user maintenance.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, insert, select

from authlink import AdapterSession, AdapterUser, NotFoundError, PersistenceError
from authlink.adapters.tables import sessions, users

pytestmark = pytest.mark.asyncio


async def count_users(db):
    return await db.scalar(select(func.count()).select_from(users))


@pytest.fixture
def identity():
    return AdapterUser(
        id="test-user-id",
        email="test@example.com",
        email_verified=datetime(2024, 1, 1, tzinfo=timezone.utc),
        name="Test User",
        image="https://example.com/avatar.jpg",
    )


class TestResolveOrCreate:
    """Test resolve_or_create."""

    async def test_creates_user_when_unknown(self, client, db, identity):
        """Test a new identity is stored with its profile fields."""
        user = await client.users.resolve_or_create(identity)

        assert user.id == "test-user-id"
        assert user.email == "test@example.com"
        assert user.name == "Test User"
        assert user.image == "https://example.com/avatar.jpg"
        assert user.email_verified == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert await count_users(db) == 1

    async def test_returns_existing_user_by_email(self, client, db, identity):
        """Test an email match is returned unchanged and nothing is inserted."""
        existing = await client.users.resolve_or_create(identity)

        again = AdapterUser(id="other-id", email="test@example.com", name="Someone Else")
        user = await client.users.resolve_or_create(again)

        assert user == existing
        assert user.name == "Test User"
        assert await count_users(db) == 1

    async def test_returns_existing_user_by_provider_account_id(self, client, db):
        """Test a provider account id matching a user id resolves to that user."""
        await client.users.resolve_or_create(AdapterUser(provider_account_id="provider-123"))

        user = await client.users.resolve_or_create(
            AdapterUser(email="new@example.com", provider_account_id="provider-123")
        )

        assert user.id == "provider-123"
        assert user.email is None
        assert await count_users(db) == 1

    async def test_uses_provider_account_id_as_user_id(self, client, identity):
        """Test the provider account id wins over the identity id."""
        identity.provider_account_id = "provider-123"

        user = await client.users.resolve_or_create(identity)

        assert user.id == "provider-123"

    async def test_generates_id_when_none_given(self, client):
        """Test a fresh id is generated for an identity without ids."""
        user = await client.users.resolve_or_create(AdapterUser(email="anon@example.com"))

        assert user.id.startswith("usr_")
        assert len(user.id) > 10

    async def test_blank_email_skips_email_lookup(self, client, monkeypatch, identity):
        """Test whitespace-only email never reaches storage."""
        spy = AsyncMock(return_value=None)
        monkeypatch.setattr(client.users, "get_by_email", spy)
        identity.email = "   "

        await client.users.resolve_or_create(identity)

        spy.assert_not_awaited()

    async def test_concurrent_create_returns_existing_row(self, client, db, monkeypatch):
        """Test a primary key clash on create re-reads the winner's row."""
        winner = await client.users.resolve_or_create(
            AdapterUser(provider_account_id="provider-123", name="Winner")
        )

        real_lookup = client.users._lookup
        calls = []

        async def racing_lookup(identity, user_id=None):
            calls.append(user_id)
            if len(calls) == 1:
                return None  # lost the race: lookup ran before the winner committed
            return await real_lookup(identity, user_id=user_id)

        monkeypatch.setattr(client.users, "_lookup", racing_lookup)

        user = await client.users.resolve_or_create(
            AdapterUser(provider_account_id="provider-123", name="Loser")
        )

        assert user == winner
        assert calls == [None, "provider-123"]
        assert await count_users(db) == 1


class TestUserReads:
    """Test soft-absence user reads."""

    async def test_get_by_email(self, client, identity):
        await client.users.resolve_or_create(identity)

        user = await client.users.get_by_email("test@example.com")

        assert user.id == "test-user-id"

    async def test_get_by_shared_email_returns_oldest(self, client, db):
        await db.execute(
            insert(users),
            [
                {"id": "a-newer", "email": "shared@example.com",
                 "created_at": datetime(2024, 6, 1, tzinfo=timezone.utc)},
                {"id": "z-older", "email": "shared@example.com",
                 "created_at": datetime(2023, 1, 1, tzinfo=timezone.utc)},
                {"id": "b-same-time", "email": "shared@example.com",
                 "created_at": datetime(2023, 1, 1, tzinfo=timezone.utc)},
            ],
        )
        await db.commit()

        user = await client.users.get_by_email("shared@example.com")

        # created_at first, id breaks the tie
        assert user.id == "b-same-time"

    async def test_get_by_email_not_found(self, client):
        assert await client.users.get_by_email("notfound@example.com") is None

    @pytest.mark.parametrize("email", ["", "   ", None])
    async def test_get_by_blank_email(self, client, email):
        assert await client.users.get_by_email(email) is None

    async def test_get_by_id(self, client, identity):
        await client.users.resolve_or_create(identity)

        user = await client.users.get_by_id("test-user-id")

        assert user.email == "test@example.com"

    async def test_get_by_id_not_found(self, client):
        assert await client.users.get_by_id("nonexistent-id") is None


class TestUpdateUser:
    """Test user update."""

    async def test_update_user(self, client, identity):
        """Test set fields are written and unset fields are kept."""
        await client.users.resolve_or_create(identity)

        user = await client.users.update(AdapterUser(id="test-user-id", name="Updated Name"))

        assert user.name == "Updated Name"
        assert user.email == "test@example.com"
        assert user.image == "https://example.com/avatar.jpg"

    async def test_update_missing_user(self, client, identity):
        with pytest.raises(NotFoundError, match="^User not found$"):
            await client.users.update(identity)

    async def test_update_returns_no_row(self, client, identity, monkeypatch):
        await client.users.resolve_or_create(identity)
        monkeypatch.setattr(client.users, "_write", AsyncMock(return_value=[]))

        with pytest.raises(PersistenceError, match="^Failed to update user$"):
            await client.users.update(AdapterUser(id="test-user-id", name="Updated Name"))


class TestDeleteUser:
    """Test user deletion."""

    async def test_delete_user_cascades_sessions(self, client, db, identity):
        await client.users.resolve_or_create(identity)
        await client.sessions.create(
            AdapterSession(
                "session-token-123", "test-user-id", datetime(2030, 1, 1, tzinfo=timezone.utc)
            )
        )

        await client.users.delete("test-user-id")

        assert await client.users.get_by_id("test-user-id") is None
        assert await db.scalar(select(func.count()).select_from(sessions)) == 0

    async def test_delete_missing_user(self, client):
        with pytest.raises(NotFoundError, match="^Delete User not found$"):
            await client.users.delete("nonexistent-id")
