"""Destination management service."""

from dataclasses import replace
from typing import Optional, Sequence
import logging

from ..config.settings import GOOGLE_CHAT_WEBHOOK_PREFIX
from ..domain.errors import InvalidRequestError, NotFoundError, PermissionDeniedError
from ..domain.models import Destination, User
from ..domain.protocols import DestinationStore
from .access_policy import AccessPolicy

logger = logging.getLogger(__name__)


class DestinationService:
    """Lists destinations per user and lets admins manage them."""

    def __init__(
        self,
        store: DestinationStore,
        *,
        url_prefix: str = GOOGLE_CHAT_WEBHOOK_PREFIX,
        policy: Optional[AccessPolicy] = None,
    ) -> None:
        self._store = store
        self._url_prefix = url_prefix
        self._policy = policy or AccessPolicy()

    async def list_for(self, user: User) -> Sequence[Destination]:
        """List the destinations a user may send to."""
        if user.is_admin:
            return await self._store.list_all()
        destinations = await self._store.list_by_ids(user.accessible_destination_ids)
        return self._policy.visible_destinations(user, destinations)

    async def create(
        self,
        actor: User,
        *,
        name: str,
        url: str,
        description: Optional[str] = None,
    ) -> Destination:
        """Create a destination (admin only)."""
        self._require_manage(actor)
        self._validate(name, url)

        destination = Destination(
            id=Destination.generate_id(),
            name=name.strip(),
            url=url.strip(),
            description=description or "",
        )
        created = await self._store.create(destination)
        logger.info(f"Destination {created.id} ({created.name}) created by {actor.id}")
        return created

    async def update(
        self,
        actor: User,
        destination_id: str,
        *,
        name: str,
        url: str,
        description: Optional[str] = None,
    ) -> Destination:
        """Update a destination (admin only)."""
        self._require_manage(actor)
        self._validate(name, url)

        existing = await self._store.get(destination_id)
        if existing is None:
            raise NotFoundError("Webhook not found")

        updated = await self._store.update(
            replace(
                existing,
                name=name.strip(),
                url=url.strip(),
                description=description if description is not None else existing.description,
            )
        )
        if updated is None:
            raise NotFoundError("Webhook not found")
        logger.info(f"Destination {destination_id} updated by {actor.id}")
        return updated

    async def delete(self, actor: User, destination_id: str) -> None:
        """Delete a destination (admin only)."""
        self._require_manage(actor)
        if not await self._store.delete(destination_id):
            raise NotFoundError("Webhook not found")
        logger.info(f"Destination {destination_id} deleted by {actor.id}")

    def _require_manage(self, actor: User) -> None:
        if not self._policy.can_manage(actor):
            raise PermissionDeniedError("Access denied. Admin privileges required.")

    def _validate(self, name: Optional[str], url: Optional[str]) -> None:
        if not name or not name.strip() or not url or not url.strip():
            raise InvalidRequestError("Name and URL are required")
        if not url.strip().startswith(self._url_prefix):
            raise InvalidRequestError(
                f"Invalid webhook URL format. Must start with {self._url_prefix}"
            )
