"""User administration routes."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ...container import get_container
from ...domain.errors import CardRelayError
from ...domain.models import User
from ...services.user_service import UserService
from ..deps import require_admin, to_http_error
from .schemas import UserResponse, user_to_response

router = APIRouter(prefix="/users", tags=["users"])


class AccessUpdateRequest(BaseModel):
    """Destination access update request model."""

    model_config = ConfigDict(populate_by_name=True)

    # Type is checked by the service so the error message is uniform
    destination_ids: Any = Field(default=None, alias="webhookIds")


def get_user_service() -> UserService:
    """Get UserService from container."""
    return get_container().user_service


@router.get("", response_model=list[UserResponse])
async def list_users(admin: User = Depends(require_admin)) -> list[UserResponse]:
    """List all users."""
    service = get_user_service()
    users = await service.list_users(admin)
    return [user_to_response(u) for u in users]


@router.put("/{user_id}/destinations", response_model=UserResponse)
async def set_user_destinations(
    user_id: str,
    request: AccessUpdateRequest,
    admin: User = Depends(require_admin),
) -> UserResponse:
    """Replace the destinations a user may send to."""
    service = get_user_service()
    try:
        user = await service.set_accessible_destinations(admin, user_id, request.destination_ids)
    except CardRelayError as e:
        raise to_http_error(e)
    return user_to_response(user)
