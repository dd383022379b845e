"""Trello board provider."""

from .client import TrelloBoardProvider

__all__ = ["TrelloBoardProvider"]
