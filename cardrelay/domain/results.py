"""Typed results returned by the notification dispatcher."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class DeliveryResult(ABC):
    """Base class for every outcome of a send operation."""

    ok: ClassVar[bool] = False
    error: ClassVar[Optional[str]] = None
    step: ClassVar[str] = ""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable outcome."""


@dataclass(frozen=True)
class Delivered(DeliveryResult):
    """Notification was accepted by the delivery channel."""

    ok: ClassVar[bool] = True
    step: ClassVar[str] = "deliver"

    destination_name: str = ""

    @property
    def message(self) -> str:
        return f"Successfully sent to {self.destination_name or 'Google Chat'}"


@dataclass(frozen=True)
class MalformedRequest(DeliveryResult):
    """Request was missing fields or had the wrong types."""

    error: ClassVar[Optional[str]] = "malformed_request"
    step: ClassVar[str] = "validate"

    reason: str = "Invalid request"

    @property
    def message(self) -> str:
        return self.reason


@dataclass(frozen=True)
class DestinationNotFound(DeliveryResult):
    """Requested destination does not exist."""

    error: ClassVar[Optional[str]] = "destination_not_found"
    step: ClassVar[str] = "resolve_destination"

    destination_id: str = ""

    @property
    def message(self) -> str:
        return "Webhook not found"


@dataclass(frozen=True)
class DestinationLookupError(DeliveryResult):
    """Destination store failed while resolving the destination."""

    error: ClassVar[Optional[str]] = "destination_lookup_error"
    step: ClassVar[str] = "resolve_destination"

    destination_id: str = ""

    @property
    def message(self) -> str:
        return "Failed to look up webhook"


@dataclass(frozen=True)
class AccessDenied(DeliveryResult):
    """Requesting user may not use the destination."""

    error: ClassVar[Optional[str]] = "access_denied"
    step: ClassVar[str] = "check_access"

    destination_id: str = ""

    @property
    def message(self) -> str:
        return "You do not have access to this webhook"


@dataclass(frozen=True)
class UpstreamFetchError(DeliveryResult):
    """Board provider failed to return the card."""

    error: ClassVar[Optional[str]] = "upstream_fetch_error"
    step: ClassVar[str] = "fetch_card"

    status: Optional[int] = None
    detail: str = ""

    @property
    def message(self) -> str:
        text = "Failed to fetch card data"
        if self.status is not None:
            text += f" (status {self.status})"
        if self.detail:
            text += f": {self.detail}"
        return text


@dataclass(frozen=True)
class DeliveryError(DeliveryResult):
    """Delivery channel rejected the payload or was unreachable."""

    error: ClassVar[Optional[str]] = "delivery_error"
    step: ClassVar[str] = "deliver"

    status: Optional[int] = None
    detail: str = ""

    @property
    def message(self) -> str:
        text = "Failed to send to Google Chat"
        if self.status is not None:
            text += f" (status {self.status})"
        if self.detail:
            text += f": {self.detail}"
        return text
