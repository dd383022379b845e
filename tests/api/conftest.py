"""Fixtures for API tests."""

import asyncio
import pytest
from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from cardrelay.api.app import create_app
from cardrelay.config.settings import clear_settings_cache
from cardrelay.container import get_container, reset_container
from cardrelay.domain.protocols import ChannelResponse
from cardrelay.repositories.memory import InMemoryDestinationStore, InMemoryUserStore
from cardrelay.services.auth_service import hash_password

JWT_SECRET = "api-test-secret-that-is-long-enough"


@pytest.fixture
def board(sample_card) -> MagicMock:
    """Board provider returning the sample card."""
    board = MagicMock()
    board.get_card = AsyncMock(return_value=replace(sample_card, labels=()))
    board.get_card_labels = AsyncMock(return_value=list(sample_card.labels))
    board.get_board = AsyncMock(return_value={"id": "board-1", "name": "Class"})
    board.get_board_lists = AsyncMock(return_value=[])
    return board


@pytest.fixture
def channel() -> MagicMock:
    """Delivery channel that accepts everything."""
    channel = MagicMock()
    channel.post = AsyncMock(return_value=ChannelResponse(ok=True, status=200))
    return channel


@pytest.fixture(autouse=True)
def setup_container(monkeypatch, board, channel, destination, admin_user, member_user):
    """Set up container with in-memory stores and mocked outbound clients."""
    monkeypatch.setenv("AUTH_JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("TRELLO_API_KEY", "test-key")
    monkeypatch.setenv("TRELLO_TOKEN", "test-token")
    clear_settings_cache()
    reset_container()

    destinations = InMemoryDestinationStore()
    users = InMemoryUserStore()
    asyncio.run(destinations.create(destination))
    asyncio.run(users.create(replace(admin_user, password_hash=hash_password("admin-pass"))))
    asyncio.run(users.create(replace(member_user, password_hash=hash_password("member-pass"))))

    container = get_container()
    container.configure_destination_store(lambda: destinations)
    container.configure_user_store(lambda: users)
    container.configure_board_provider(lambda: board)
    container.configure_delivery_channel(lambda: channel)
    yield container
    reset_container()
    clear_settings_cache()


@pytest.fixture
def jwt_secret() -> str:
    return JWT_SECRET


@pytest.fixture
def client():
    """Create test client."""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def admin_headers(admin_user) -> dict:
    token = get_container().auth_service.issue_token(admin_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def member_headers(member_user) -> dict:
    token = get_container().auth_service.issue_token(member_user)
    return {"Authorization": f"Bearer {token}"}
