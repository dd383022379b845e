"""Tests for UserService."""

import pytest
import pytest_asyncio

from cardrelay.domain.errors import InvalidRequestError, NotFoundError, PermissionDeniedError
from cardrelay.domain.models import Destination
from cardrelay.repositories.memory import InMemoryDestinationStore, InMemoryUserStore
from cardrelay.services.user_service import UserService


@pytest_asyncio.fixture
async def destinations(destination) -> InMemoryDestinationStore:
    store = InMemoryDestinationStore()
    await store.create(destination)
    await store.create(
        Destination(id="dest-2", name="Other Chat", url="https://chat.googleapis.com/v1/spaces/CCC")
    )
    return store


@pytest_asyncio.fixture
async def users(admin_user, member_user) -> InMemoryUserStore:
    store = InMemoryUserStore()
    await store.create(admin_user)
    await store.create(member_user)
    return store


@pytest.fixture
def service(users, destinations) -> UserService:
    return UserService(users, destinations)


class TestListUsers:
    """Tests for listing users."""

    @pytest.mark.asyncio
    async def test_admin_lists_users(self, service, admin_user):
        users = await service.list_users(admin_user)
        assert {u.id for u in users} == {"admin-1", "member-1"}

    @pytest.mark.asyncio
    async def test_member_cannot_list(self, service, member_user):
        with pytest.raises(PermissionDeniedError):
            await service.list_users(member_user)


class TestSetAccessibleDestinations:
    """Tests for replacing a user's destination access."""

    @pytest.mark.asyncio
    async def test_replaces_not_merges(self, service, users, admin_user):
        updated = await service.set_accessible_destinations(admin_user, "member-1", ["dest-2"])

        assert updated.accessible_destination_ids == frozenset({"dest-2"})
        assert (await users.get("member-1")).accessible_destination_ids == frozenset({"dest-2"})

    @pytest.mark.asyncio
    async def test_empty_list_clears_access(self, service, admin_user):
        updated = await service.set_accessible_destinations(admin_user, "member-1", [])
        assert updated.accessible_destination_ids == frozenset()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ids", ["dest-1", None, {"id": "dest-1"}, [1, 2]])
    async def test_requires_list_of_ids(self, service, admin_user, ids):
        with pytest.raises(InvalidRequestError, match="webhookIds must be an array"):
            await service.set_accessible_destinations(admin_user, "member-1", ids)

    @pytest.mark.asyncio
    async def test_rejects_unknown_ids(self, service, users, admin_user):
        with pytest.raises(InvalidRequestError, match="Unknown webhook IDs: nope"):
            await service.set_accessible_destinations(admin_user, "member-1", ["dest-1", "nope"])
        assert (await users.get("member-1")).accessible_destination_ids == frozenset({"dest-1"})

    @pytest.mark.asyncio
    async def test_missing_user(self, service, admin_user):
        with pytest.raises(NotFoundError, match="User not found"):
            await service.set_accessible_destinations(admin_user, "ghost", ["dest-1"])

    @pytest.mark.asyncio
    async def test_member_cannot_grant(self, service, member_user):
        with pytest.raises(PermissionDeniedError):
            await service.set_accessible_destinations(member_user, "member-1", ["dest-2"])
