"""Exceptions raised at the collaborator and service seams."""

from typing import Optional


class CardRelayError(Exception):
    """Base class for application errors."""


class BoardProviderError(CardRelayError):
    """Board provider request failed."""

    def __init__(self, status: Optional[int], message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class NotFoundError(CardRelayError):
    """Requested record does not exist."""


class ConflictError(CardRelayError):
    """Record conflicts with an existing one."""


class InvalidRequestError(CardRelayError):
    """Input failed validation."""


class AuthenticationError(CardRelayError):
    """Credentials or token are missing or invalid."""


class PermissionDeniedError(CardRelayError):
    """User lacks the rights for the operation."""


class ConfigurationError(CardRelayError):
    """Required configuration is missing."""
