"""Board browsing routes."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...container import get_container
from ...domain.errors import BoardProviderError
from ...domain.models import BoardCredentials, User
from ..deps import get_current_user
from .schemas import CardResponse, card_to_response

router = APIRouter(prefix="/boards", tags=["boards"])


class BoardListResponse(BaseModel):
    """Board list response model."""

    id: str
    name: str
    cards: list[CardResponse] = Field(default_factory=list)


def get_credentials() -> BoardCredentials:
    """Get board credentials from settings."""
    credentials = get_container().settings.trello.credentials()
    if credentials is None:
        raise HTTPException(503, "Trello credentials are not configured")
    return credentials


@router.get("/{board_id}")
async def get_board(board_id: str, user: User = Depends(get_current_user)) -> dict[str, Any]:
    """Get board metadata."""
    board = get_container().board_provider
    try:
        return await board.get_board(board_id, credentials=get_credentials())
    except BoardProviderError as e:
        raise HTTPException(502, f"Failed to fetch board data: {e.message}")


@router.get("/{board_id}/lists", response_model=list[BoardListResponse])
async def get_board_lists(
    board_id: str, user: User = Depends(get_current_user)
) -> list[BoardListResponse]:
    """Get the board's lists with their open cards."""
    board = get_container().board_provider
    try:
        lists = await board.get_board_lists(board_id, credentials=get_credentials())
    except BoardProviderError as e:
        raise HTTPException(502, f"Failed to fetch lists data: {e.message}")

    return [
        BoardListResponse(
            id=board_list.id,
            name=board_list.name,
            cards=[card_to_response(c) for c in board_list.cards],
        )
        for board_list in lists
    ]
