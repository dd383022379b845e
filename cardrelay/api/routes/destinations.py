"""Chat destination routes."""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...container import get_container
from ...domain.errors import CardRelayError
from ...domain.models import User
from ...services.destination_service import DestinationService
from ..deps import get_current_user, require_admin, to_http_error
from .schemas import DestinationResponse, destination_to_response

router = APIRouter(prefix="/destinations", tags=["destinations"])


class DestinationRequest(BaseModel):
    """Destination create/update request model."""

    name: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


def get_destination_service() -> DestinationService:
    """Get DestinationService from container."""
    return get_container().destination_service


@router.get("", response_model=list[DestinationResponse])
async def list_destinations(user: User = Depends(get_current_user)) -> list[DestinationResponse]:
    """List destinations the current user may send to."""
    service = get_destination_service()
    destinations = await service.list_for(user)
    return [destination_to_response(d) for d in destinations]


@router.post("", response_model=DestinationResponse, status_code=201)
async def create_destination(
    request: DestinationRequest, admin: User = Depends(require_admin)
) -> DestinationResponse:
    """Create a destination."""
    service = get_destination_service()
    try:
        created = await service.create(
            admin,
            name=request.name or "",
            url=request.url or "",
            description=request.description,
        )
    except CardRelayError as e:
        raise to_http_error(e)
    return destination_to_response(created)


@router.put("/{destination_id}", response_model=DestinationResponse)
async def update_destination(
    destination_id: str,
    request: DestinationRequest,
    admin: User = Depends(require_admin),
) -> DestinationResponse:
    """Update a destination."""
    service = get_destination_service()
    try:
        updated = await service.update(
            admin,
            destination_id,
            name=request.name or "",
            url=request.url or "",
            description=request.description,
        )
    except CardRelayError as e:
        raise to_http_error(e)
    return destination_to_response(updated)


@router.delete("/{destination_id}")
async def delete_destination(destination_id: str, admin: User = Depends(require_admin)) -> dict:
    """Delete a destination."""
    service = get_destination_service()
    try:
        await service.delete(admin, destination_id)
    except CardRelayError as e:
        raise to_http_error(e)
    return {"message": "Webhook deleted successfully"}
