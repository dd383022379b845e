"""In-memory implementations of stores for testing and local runs."""

from dataclasses import replace
from typing import Optional, Sequence

from ..domain.models import Destination, User


class InMemoryDestinationStore:
    """In-memory implementation of DestinationStore."""

    def __init__(self) -> None:
        self._destinations: dict[str, Destination] = {}

    async def get(self, destination_id: str) -> Optional[Destination]:
        """Retrieve a destination by ID."""
        return self._destinations.get(destination_id)

    async def list_all(self) -> Sequence[Destination]:
        """List every destination."""
        return list(self._destinations.values())

    async def list_by_ids(self, destination_ids: frozenset[str]) -> Sequence[Destination]:
        """List destinations whose ids are in the given set."""
        return [d for d in self._destinations.values() if d.id in destination_ids]

    async def create(self, destination: Destination) -> Destination:
        """Create a new destination."""
        if destination.id in self._destinations:
            raise ValueError(f"Destination {destination.id} already exists")
        self._destinations[destination.id] = destination
        return destination

    async def update(self, destination: Destination) -> Optional[Destination]:
        """Update an existing destination."""
        if destination.id not in self._destinations:
            return None
        self._destinations[destination.id] = destination
        return destination

    async def delete(self, destination_id: str) -> bool:
        """Delete a destination."""
        if destination_id in self._destinations:
            del self._destinations[destination_id]
            return True
        return False


class InMemoryUserStore:
    """In-memory implementation of UserStore."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def get(self, user_id: str) -> Optional[User]:
        """Retrieve a user by ID."""
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def list_users(self) -> Sequence[User]:
        """List all users."""
        return list(self._users.values())

    async def create(self, user: User) -> User:
        """Create a new user."""
        if user.id in self._users:
            raise ValueError(f"User {user.id} already exists")
        self._users[user.id] = user
        return user

    async def set_accessible_destinations(
        self, user_id: str, destination_ids: frozenset[str]
    ) -> Optional[User]:
        """Replace the user's accessible destination set."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = replace(user, accessible_destination_ids=frozenset(destination_ids))
        self._users[user_id] = updated
        return updated
