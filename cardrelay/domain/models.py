"""Domain models for the card relay system."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
import uuid


class UserRole(Enum):
    """User role values."""

    ADMIN = "admin"
    MEMBER = "member"


class SectionKind(Enum):
    """Kinds of sections in a notification payload."""

    HEADER = "header"
    CAPTION = "caption"
    LINK = "link"
    METADATA = "metadata"
    ACTION = "action"


@dataclass(frozen=True)
class BoardCredentials:
    """Credentials for a single call to the board provider."""

    api_key: str
    token: str

    def as_params(self) -> dict[str, str]:
        """Return credentials as query parameters."""
        return {"key": self.api_key, "token": self.token}

    def __repr__(self) -> str:
        return "BoardCredentials(api_key='***', token='***')"


@dataclass(frozen=True)
class Label:
    """Colored tag attached to a card."""

    name: str
    color: Optional[str] = None


@dataclass(frozen=True)
class Card:
    """Snapshot of a board card, fetched per request."""

    id: str
    title: str
    description: str = ""
    labels: tuple[Label, ...] = ()
    due_at: Optional[datetime] = None
    due_complete: bool = False
    source_url: str = ""


@dataclass(frozen=True)
class BoardList:
    """A list (column) on the board with its open cards."""

    id: str
    name: str
    cards: tuple[Card, ...] = ()


@dataclass(frozen=True)
class Destination:
    """Chat webhook target."""

    id: str
    name: str
    url: str
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def generate_id() -> str:
        """Generate a new unique destination id."""
        return uuid.uuid4().hex


@dataclass(frozen=True)
class User:
    """Application user."""

    id: str
    name: str
    email: str
    role: UserRole = UserRole.MEMBER
    accessible_destination_ids: frozenset[str] = frozenset()
    password_hash: str = field(default="", repr=False, compare=False)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @staticmethod
    def generate_id() -> str:
        """Generate a new unique user id."""
        return uuid.uuid4().hex


@dataclass(frozen=True)
class ExtractedLink:
    """Labeled hyperlink pulled out of a card description."""

    text: str
    url: str


@dataclass(frozen=True)
class Section:
    """One rendered section of a notification."""

    kind: SectionKind
    text: str = ""
    subtitle: Optional[str] = None  # header only
    button_text: Optional[str] = None  # action only
    url: Optional[str] = None  # link and action


@dataclass(frozen=True)
class NotificationPayload:
    """Ordered notification built from a card."""

    card_id: str
    header: Section
    sections: tuple[Section, ...]

    @property
    def kinds(self) -> list[SectionKind]:
        """Section kinds in render order, header first."""
        return [self.header.kind] + [s.kind for s in self.sections]

    def section(self, kind: SectionKind) -> Optional[Section]:
        """Return the first body section of the given kind."""
        for s in self.sections:
            if s.kind == kind:
                return s
        return None
