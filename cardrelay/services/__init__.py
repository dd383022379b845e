"""Service layer implementations."""

from .access_policy import AccessPolicy
from .auth_service import AuthService, hash_password, verify_password
from .destination_service import DestinationService
from .dispatcher import NotificationDispatcher
from .link_extractor import extract_link
from .message_composer import MessageComposer
from .user_service import UserService

__all__ = [
    "AccessPolicy",
    "AuthService",
    "DestinationService",
    "MessageComposer",
    "NotificationDispatcher",
    "UserService",
    "extract_link",
    "hash_password",
    "verify_password",
]
