"""Domain models and protocols."""

from .models import (
    BoardCredentials,
    BoardList,
    Card,
    Destination,
    ExtractedLink,
    Label,
    NotificationPayload,
    Section,
    SectionKind,
    User,
    UserRole,
)
from .protocols import (
    BoardProvider,
    ChannelResponse,
    DeliveryChannel,
    DestinationStore,
    UserStore,
)
from .results import (
    AccessDenied,
    Delivered,
    DeliveryError,
    DeliveryResult,
    DestinationLookupError,
    DestinationNotFound,
    MalformedRequest,
    UpstreamFetchError,
)

__all__ = [
    "BoardCredentials",
    "BoardList",
    "Card",
    "Destination",
    "ExtractedLink",
    "Label",
    "NotificationPayload",
    "Section",
    "SectionKind",
    "User",
    "UserRole",
    "BoardProvider",
    "ChannelResponse",
    "DeliveryChannel",
    "DestinationStore",
    "UserStore",
    "AccessDenied",
    "Delivered",
    "DeliveryError",
    "DeliveryResult",
    "DestinationLookupError",
    "DestinationNotFound",
    "MalformedRequest",
    "UpstreamFetchError",
]
