"""Send board cards to chat destinations."""

from dataclasses import replace
from typing import Any, Optional
import logging

from ..domain.errors import BoardProviderError
from ..domain.models import BoardCredentials, User
from ..domain.protocols import BoardProvider, DeliveryChannel, DestinationStore
from ..domain.results import (
    AccessDenied,
    Delivered,
    DeliveryError,
    DeliveryResult,
    DestinationLookupError,
    DestinationNotFound,
    MalformedRequest,
    UpstreamFetchError,
)
from .access_policy import AccessPolicy
from .message_composer import MessageComposer

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Orchestrates fetch card, check access, compose and deliver.

    Every failure is returned as a typed DeliveryResult; nothing is retried
    and no state is shared between calls.
    """

    def __init__(
        self,
        destinations: DestinationStore,
        board: BoardProvider,
        channel: DeliveryChannel,
        *,
        credentials: Optional[BoardCredentials],
        composer: Optional[MessageComposer] = None,
        policy: Optional[AccessPolicy] = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            destinations: Destination store
            board: Board provider
            channel: Delivery channel
            credentials: Board credentials passed on every provider call
            composer: Message composer (default settings if omitted)
            policy: Access policy
        """
        self._destinations = destinations
        self._board = board
        self._channel = channel
        self._credentials = credentials
        self._composer = composer or MessageComposer()
        self._policy = policy or AccessPolicy()

    async def send(
        self,
        card_id: Any,
        destination_id: Any,
        caption: Any,
        requesting_user: Any,
    ) -> DeliveryResult:
        """Send a card to a destination on behalf of a user.

        Args:
            card_id: Board card ID
            destination_id: Destination ID
            caption: Optional caption text
            requesting_user: Authenticated user

        Returns:
            Delivered on success, otherwise the failure for the first step
            that failed
        """
        malformed = self._validate(card_id, destination_id, caption, requesting_user)
        if malformed:
            logger.warning(f"Rejected send request: {malformed.reason}")
            return malformed

        try:
            destination = await self._destinations.get(destination_id)
        except Exception:
            logger.exception(f"Lookup of destination {destination_id} failed")
            return DestinationLookupError(destination_id=destination_id)

        if destination is None:
            logger.warning(f"Destination {destination_id} not found")
            return DestinationNotFound(destination_id=destination_id)

        if not self._policy.can_use(requesting_user, destination_id):
            logger.warning(
                f"User {requesting_user.id} denied access to destination {destination_id}"
            )
            return AccessDenied(destination_id=destination_id)

        if self._credentials is None:
            logger.error("Board credentials are not configured")
            return UpstreamFetchError(status=None, detail="Board credentials are not configured")

        try:
            card = await self._board.get_card(card_id, credentials=self._credentials)
            labels = await self._board.get_card_labels(card_id, credentials=self._credentials)
        except BoardProviderError as e:
            logger.warning(f"Failed to fetch card {card_id}: {e.status} {e.message}")
            return UpstreamFetchError(status=e.status, detail=e.message)
        except Exception as e:
            logger.exception(f"Unexpected error fetching card {card_id}")
            return UpstreamFetchError(status=None, detail=str(e) or type(e).__name__)

        card = replace(card, labels=tuple(labels))
        payload = self._composer.compose(card, caption, destination.name)

        try:
            response = await self._channel.post(destination.url, payload)
        except Exception as e:
            logger.exception(f"Unexpected error delivering card {card_id} to {destination.name}")
            return DeliveryError(status=None, detail=str(e) or type(e).__name__)

        if not response.ok:
            logger.warning(
                f"Delivery of card {card_id} to {destination.name} failed: "
                f"{response.status} {response.message}"
            )
            return DeliveryError(status=response.status, detail=response.message)

        logger.info(f"Sent card {card_id} to {destination.name}")
        return Delivered(destination_name=destination.name)

    @staticmethod
    def _validate(
        card_id: Any, destination_id: Any, caption: Any, requesting_user: Any
    ) -> Optional[MalformedRequest]:
        if not isinstance(card_id, str) or not card_id.strip():
            return MalformedRequest(reason="Card ID is required")
        if not isinstance(destination_id, str) or not destination_id.strip():
            return MalformedRequest(reason="Webhook ID is required")
        if caption is not None and not isinstance(caption, str):
            return MalformedRequest(reason="Caption must be a string")
        if not isinstance(requesting_user, User):
            return MalformedRequest(reason="Requesting user is required")
        return None
