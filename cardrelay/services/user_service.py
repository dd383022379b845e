"""User administration service."""

from typing import Any, Optional, Sequence
import logging

from ..domain.errors import InvalidRequestError, NotFoundError, PermissionDeniedError
from ..domain.models import User
from ..domain.protocols import DestinationStore, UserStore
from .access_policy import AccessPolicy

logger = logging.getLogger(__name__)


class UserService:
    """Admin-only user listing and destination access management."""

    def __init__(
        self,
        users: UserStore,
        destinations: DestinationStore,
        *,
        policy: Optional[AccessPolicy] = None,
    ) -> None:
        self._users = users
        self._destinations = destinations
        self._policy = policy or AccessPolicy()

    async def list_users(self, actor: User) -> Sequence[User]:
        self._require_manage(actor)
        return await self._users.list_users()

    async def set_accessible_destinations(
        self, actor: User, user_id: str, destination_ids: Any
    ) -> User:
        """Replace a user's accessible destinations.

        The new set fully replaces the old one; it is not merged.

        Args:
            actor: Admin performing the change
            user_id: User to update
            destination_ids: List of destination IDs

        Returns:
            The updated user

        Raises:
            PermissionDeniedError: actor is not an admin
            InvalidRequestError: ids are not a list or reference unknown destinations
            NotFoundError: user does not exist
        """
        self._require_manage(actor)

        if not isinstance(destination_ids, list) or not all(
            isinstance(d, str) for d in destination_ids
        ):
            raise InvalidRequestError("webhookIds must be an array")

        ids = frozenset(destination_ids)
        known = {d.id for d in await self._destinations.list_by_ids(ids)}
        unknown = ids - known
        if unknown:
            raise InvalidRequestError(f"Unknown webhook IDs: {', '.join(sorted(unknown))}")

        updated = await self._users.set_accessible_destinations(user_id, ids)
        if updated is None:
            raise NotFoundError("User not found")

        logger.info(f"User {user_id} access set to {len(ids)} destination(s) by {actor.id}")
        return updated

    def _require_manage(self, actor: User) -> None:
        if not self._policy.can_manage(actor):
            raise PermissionDeniedError("Access denied. Admin privileges required.")
