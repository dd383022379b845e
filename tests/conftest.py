"""Shared pytest fixtures."""

import pytest
from datetime import datetime, timezone

from cardrelay.domain.models import Card, Destination, Label, User, UserRole


@pytest.fixture
def sample_card() -> Card:
    """Create a sample card for testing."""
    return Card(
        id="card-5",
        title="Session 5",
        description="Agenda\nLink Presensi: [Join](https://meet.test/5)\nBring laptop",
        labels=(Label(name="Urgent", color="red"),),
        due_at=datetime(2024, 5, 1, 3, 0, tzinfo=timezone.utc),
        due_complete=False,
        source_url="https://board.test/c/5",
    )


@pytest.fixture
def destination() -> Destination:
    """Create a sample destination."""
    return Destination(
        id="dest-1",
        name="Team Chat",
        url="https://chat.googleapis.com/v1/spaces/AAA/messages?key=k&token=t",
        description="Main team space",
    )


@pytest.fixture
def admin_user() -> User:
    """Create an admin with no explicit destination access."""
    return User(
        id="admin-1",
        name="Admin",
        email="admin@example.com",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def member_user() -> User:
    """Create a member with access to dest-1 only."""
    return User(
        id="member-1",
        name="Member",
        email="member@example.com",
        role=UserRole.MEMBER,
        accessible_destination_ids=frozenset({"dest-1"}),
    )
