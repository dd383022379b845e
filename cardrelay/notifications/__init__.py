"""Delivery channel implementations."""

from .google_chat import GoogleChatChannel

__all__ = [
    "GoogleChatChannel",
]
