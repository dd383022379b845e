"""Dependency injection container."""

from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Optional, Any

from cardrelay.domain.protocols import (
    BoardProvider,
    DeliveryChannel,
    DestinationStore,
    UserStore,
)


T = TypeVar("T")


class Provider(Generic[T]):
    """Lazy provider that creates instance on first access."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._instance: Optional[T] = None

    def get(self) -> T:
        """Get the instance, creating it if necessary."""
        if self._instance is None:
            self._instance = self._factory()
        return self._instance

    def reset(self) -> None:
        """Reset the instance (for testing)."""
        self._instance = None

    def override(self, instance: T) -> None:
        """Override with a specific instance (for testing)."""
        self._instance = instance


@dataclass
class Container:
    """Dependency injection container."""

    # Stores
    _destination_store: Optional[Provider[DestinationStore]] = None
    _user_store: Optional[Provider[UserStore]] = None

    # Outbound collaborators
    _board_provider: Optional[Provider[BoardProvider]] = None
    _delivery_channel: Optional[Provider[DeliveryChannel]] = None

    # Settings cache
    _settings: Optional[Any] = None

    @property
    def is_configured(self) -> bool:
        """Check whether the stores have been configured."""
        return self._destination_store is not None and self._user_store is not None

    @property
    def has_board_provider(self) -> bool:
        return self._board_provider is not None

    @property
    def has_delivery_channel(self) -> bool:
        return self._delivery_channel is not None

    @property
    def destination_store(self) -> DestinationStore:
        """Get the destination store."""
        if self._destination_store is None:
            raise RuntimeError("Destination store not configured")
        return self._destination_store.get()

    @property
    def user_store(self) -> UserStore:
        """Get the user store."""
        if self._user_store is None:
            raise RuntimeError("User store not configured")
        return self._user_store.get()

    @property
    def board_provider(self) -> BoardProvider:
        """Get the board provider."""
        if self._board_provider is None:
            raise RuntimeError("Board provider not configured")
        return self._board_provider.get()

    @property
    def delivery_channel(self) -> DeliveryChannel:
        """Get the delivery channel."""
        if self._delivery_channel is None:
            raise RuntimeError("Delivery channel not configured")
        return self._delivery_channel.get()

    @property
    def access_policy(self) -> Any:
        """Get AccessPolicy instance."""
        from cardrelay.services.access_policy import AccessPolicy

        return AccessPolicy()

    @property
    def message_composer(self) -> Any:
        """Get MessageComposer configured from settings."""
        from cardrelay.services.message_composer import MessageComposer

        message = self.settings.message
        return MessageComposer(
            link_label=message.link_label,
            timezone=message.timezone,
            date_format=message.date_format,
        )

    @property
    def dispatcher(self) -> Any:
        """Get NotificationDispatcher instance."""
        from cardrelay.services.dispatcher import NotificationDispatcher

        return NotificationDispatcher(
            destinations=self.destination_store,
            board=self.board_provider,
            channel=self.delivery_channel,
            credentials=self.settings.trello.credentials(),
            composer=self.message_composer,
            policy=self.access_policy,
        )

    @property
    def destination_service(self) -> Any:
        """Get DestinationService instance."""
        from cardrelay.services.destination_service import DestinationService

        return DestinationService(
            self.destination_store,
            url_prefix=self.settings.google_chat.webhook_prefix,
            policy=self.access_policy,
        )

    @property
    def user_service(self) -> Any:
        """Get UserService instance."""
        from cardrelay.services.user_service import UserService

        return UserService(
            self.user_store,
            self.destination_store,
            policy=self.access_policy,
        )

    @property
    def auth_service(self) -> Any:
        """Get AuthService instance."""
        from cardrelay.services.auth_service import AuthService

        auth = self.settings.auth
        return AuthService(
            self.user_store,
            secret=auth.jwt_secret.get_secret_value() if auth.jwt_secret else None,
            algorithm=auth.jwt_algorithm,
            expiration_minutes=auth.jwt_expiration_minutes,
        )

    @property
    def settings(self) -> Any:
        """Get application settings."""
        if self._settings is None:
            from cardrelay.config.settings import get_settings

            self._settings = get_settings()
        return self._settings

    def configure_destination_store(
        self, factory: Callable[[], DestinationStore]
    ) -> "Container":
        """Configure the destination store."""
        self._destination_store = Provider(factory)
        return self

    def configure_user_store(self, factory: Callable[[], UserStore]) -> "Container":
        """Configure the user store."""
        self._user_store = Provider(factory)
        return self

    def configure_board_provider(
        self, factory: Callable[[], BoardProvider]
    ) -> "Container":
        """Configure the board provider."""
        self._board_provider = Provider(factory)
        return self

    def configure_delivery_channel(
        self, factory: Callable[[], DeliveryChannel]
    ) -> "Container":
        """Configure the delivery channel."""
        self._delivery_channel = Provider(factory)
        return self

    def configure_settings(self, settings: Any) -> "Container":
        """Use specific settings instead of the environment."""
        self._settings = settings
        return self

    def reset(self) -> None:
        """Reset all providers (for testing)."""
        for provider in (
            self._destination_store,
            self._user_store,
            self._board_provider,
            self._delivery_channel,
        ):
            if provider:
                provider.reset()
        self._settings = None


# Global container instance
container = Container()


def get_container() -> Container:
    """Get the global container instance."""
    return container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global container
    container.reset()
    container = Container()
