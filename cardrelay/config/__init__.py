"""Configuration module."""

from .settings import (
    AppSettings,
    AuthSettings,
    DatabaseSettings,
    GoogleChatSettings,
    MessageSettings,
    TrelloSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "AuthSettings",
    "DatabaseSettings",
    "GoogleChatSettings",
    "MessageSettings",
    "TrelloSettings",
    "get_settings",
]
