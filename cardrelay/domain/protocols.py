"""Protocol definitions for dependency injection."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable, Optional, Sequence

from .models import (
    BoardCredentials,
    BoardList,
    Card,
    Destination,
    Label,
    NotificationPayload,
    User,
)


@dataclass(frozen=True)
class ChannelResponse:
    """Outcome of a delivery channel post."""

    ok: bool
    status: Optional[int] = None
    message: str = ""


@runtime_checkable
class BoardProvider(Protocol):
    """Protocol for reading cards from the task board."""

    async def get_card(self, card_id: str, *, credentials: BoardCredentials) -> Card:
        """Fetch a card, raising BoardProviderError on failure."""
        ...

    async def get_card_labels(
        self, card_id: str, *, credentials: BoardCredentials
    ) -> Sequence[Label]:
        """Fetch a card's labels in board order."""
        ...

    async def get_board(self, board_id: str, *, credentials: BoardCredentials) -> dict:
        """Fetch raw board metadata."""
        ...

    async def get_board_lists(
        self, board_id: str, *, credentials: BoardCredentials
    ) -> Sequence[BoardList]:
        """Fetch the board's lists with their open cards."""
        ...


@runtime_checkable
class DestinationStore(Protocol):
    """Protocol for destination persistence."""

    async def get(self, destination_id: str) -> Optional[Destination]:
        """Retrieve a destination by ID."""
        ...

    async def list_all(self) -> Sequence[Destination]:
        """List every destination."""
        ...

    async def list_by_ids(self, destination_ids: frozenset[str]) -> Sequence[Destination]:
        """List destinations whose ids are in the given set."""
        ...

    async def create(self, destination: Destination) -> Destination:
        """Create a destination."""
        ...

    async def update(self, destination: Destination) -> Optional[Destination]:
        """Update a destination, return None if it does not exist."""
        ...

    async def delete(self, destination_id: str) -> bool:
        """Delete a destination, return True if it existed."""
        ...


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user persistence."""

    async def get(self, user_id: str) -> Optional[User]:
        """Retrieve a user by ID."""
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email."""
        ...

    async def list_users(self) -> Sequence[User]:
        """List all users."""
        ...

    async def create(self, user: User) -> User:
        """Create a user."""
        ...

    async def set_accessible_destinations(
        self, user_id: str, destination_ids: frozenset[str]
    ) -> Optional[User]:
        """Replace the user's accessible destination set."""
        ...


@runtime_checkable
class DeliveryChannel(Protocol):
    """Protocol for delivering notifications to a chat destination."""

    async def post(
        self, delivery_url: str, payload: NotificationPayload
    ) -> ChannelResponse:
        """Deliver a payload; never raises."""
        ...
