"""Response models shared across routes."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models import Card, Destination, User


class UserResponse(BaseModel):
    """User response model."""

    id: str
    name: str
    email: str
    role: str
    accessible_destination_ids: list[str] = Field(default_factory=list)


class DestinationResponse(BaseModel):
    """Destination response model."""

    id: str
    name: str
    url: str
    description: str = ""
    created_at: datetime


class LabelResponse(BaseModel):
    name: str
    color: Optional[str] = None


class CardResponse(BaseModel):
    """Card response model."""

    id: str
    title: str
    description: str = ""
    labels: list[LabelResponse] = Field(default_factory=list)
    due_at: Optional[datetime] = None
    due_complete: bool = False
    source_url: str = ""


def user_to_response(user: User) -> UserResponse:
    """Convert User to UserResponse."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        accessible_destination_ids=sorted(user.accessible_destination_ids),
    )


def destination_to_response(destination: Destination) -> DestinationResponse:
    """Convert Destination to DestinationResponse."""
    return DestinationResponse(
        id=destination.id,
        name=destination.name,
        url=destination.url,
        description=destination.description,
        created_at=destination.created_at,
    )


def card_to_response(card: Card) -> CardResponse:
    """Convert Card to CardResponse."""
    return CardResponse(
        id=card.id,
        title=card.title,
        description=card.description,
        labels=[LabelResponse(name=label.name, color=label.color) for label in card.labels],
        due_at=card.due_at,
        due_complete=card.due_complete,
        source_url=card.source_url,
    )
