"""Tests for SQL stores against an in-memory SQLite database."""

import pytest
import pytest_asyncio
from dataclasses import replace

from cardrelay.db import Database
from cardrelay.domain.models import Destination, UserRole
from cardrelay.repositories.sql import SqlDestinationStore, SqlUserStore


@pytest_asyncio.fixture
async def database():
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def destinations(database) -> SqlDestinationStore:
    return SqlDestinationStore(database)


@pytest.fixture
def users(database) -> SqlUserStore:
    return SqlUserStore(database)


class TestSqlDestinationStore:
    """Tests for SqlDestinationStore."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, destinations, destination):
        await destinations.create(destination)

        retrieved = await destinations.get("dest-1")

        assert retrieved.name == "Team Chat"
        assert retrieved.url == destination.url
        assert retrieved.description == "Main team space"

    @pytest.mark.asyncio
    async def test_get_nonexistent(self, destinations):
        assert await destinations.get("missing") is None

    @pytest.mark.asyncio
    async def test_list_by_ids(self, destinations, destination):
        await destinations.create(destination)
        await destinations.create(
            Destination(id="dest-2", name="Two", url="https://chat.googleapis.com/v1/spaces/2")
        )

        assert [d.id for d in await destinations.list_by_ids(frozenset({"dest-2"}))] == ["dest-2"]
        assert await destinations.list_by_ids(frozenset()) == []
        assert {d.id for d in await destinations.list_all()} == {"dest-1", "dest-2"}

    @pytest.mark.asyncio
    async def test_update(self, destinations, destination):
        await destinations.create(destination)

        updated = await destinations.update(replace(destination, name="Renamed"))

        assert updated.name == "Renamed"
        assert (await destinations.get("dest-1")).name == "Renamed"

    @pytest.mark.asyncio
    async def test_update_nonexistent(self, destinations, destination):
        assert await destinations.update(destination) is None

    @pytest.mark.asyncio
    async def test_delete_removes_user_access(self, destinations, users, destination, member_user):
        """Should drop the destination from every user's access set."""
        await destinations.create(destination)
        await users.create(member_user)

        assert await destinations.delete("dest-1") is True

        assert await destinations.get("dest-1") is None
        assert (await users.get("member-1")).accessible_destination_ids == frozenset()
        assert await destinations.delete("dest-1") is False


class TestSqlUserStore:
    """Tests for SqlUserStore."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, users, destinations, destination, member_user):
        await destinations.create(destination)
        await users.create(replace(member_user, password_hash="hash"))

        user = await users.get("member-1")

        assert user.email == "member@example.com"
        assert user.role == UserRole.MEMBER
        assert user.accessible_destination_ids == frozenset({"dest-1"})
        assert user.password_hash == "hash"

    @pytest.mark.asyncio
    async def test_get_by_email(self, users, admin_user):
        await users.create(admin_user)

        user = await users.get_by_email("admin@example.com")

        assert user.id == "admin-1"
        assert user.is_admin
        assert await users.get_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_set_accessible_destinations(self, users, destinations, destination, member_user):
        await destinations.create(destination)
        await destinations.create(
            Destination(id="dest-2", name="Two", url="https://chat.googleapis.com/v1/spaces/2")
        )
        await users.create(member_user)

        updated = await users.set_accessible_destinations("member-1", frozenset({"dest-2"}))

        assert updated.accessible_destination_ids == frozenset({"dest-2"})
        assert (await users.get("member-1")).accessible_destination_ids == frozenset({"dest-2"})

    @pytest.mark.asyncio
    async def test_set_accessible_destinations_missing_user(self, users):
        assert await users.set_accessible_destinations("ghost", frozenset()) is None

    @pytest.mark.asyncio
    async def test_list_users(self, users, admin_user, member_user):
        await users.create(admin_user)
        await users.create(member_user)

        assert [u.name for u in await users.list_users()] == ["Admin", "Member"]
