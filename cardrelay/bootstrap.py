"""Wire the container from settings."""

from typing import Optional
import logging

from .container import Container, get_container
from .db import Database
from .notifications.google_chat import GoogleChatChannel
from .repositories.sql import SqlDestinationStore, SqlUserStore
from .trello.client import TrelloBoardProvider

logger = logging.getLogger(__name__)


def open_database(settings) -> Database:
    """Create the database handle described by settings."""
    db_settings = settings.database
    return Database(db_settings.url, echo=db_settings.echo)


def setup_container(
    database: Optional[Database] = None,
    container: Optional[Container] = None,
) -> Container:
    """Configure stores and outbound clients on the container.

    Stores already configured (for example by tests) are left alone.
    """
    container = container or get_container()
    settings = container.settings

    if not container.is_configured:
        if database is None:
            raise RuntimeError("A database is required to configure the stores")
        container.configure_destination_store(lambda: SqlDestinationStore(database))
        container.configure_user_store(lambda: SqlUserStore(database))

    trello = settings.trello
    if not container.has_board_provider:
        container.configure_board_provider(
            lambda: TrelloBoardProvider(base_url=trello.base_url, timeout=trello.timeout)
        )
        if trello.credentials() is None:
            logger.warning("TRELLO_API_KEY/TRELLO_TOKEN not set; card fetches will fail")

    if not container.has_delivery_channel:
        google_chat = settings.google_chat
        container.configure_delivery_channel(
            lambda: GoogleChatChannel(timeout=google_chat.timeout)
        )

    return container
