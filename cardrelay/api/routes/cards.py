"""Card notification routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...container import get_container
from ...domain.models import User
from ...domain.results import (
    AccessDenied,
    Delivered,
    DeliveryError,
    DeliveryResult,
    DestinationLookupError,
    DestinationNotFound,
    MalformedRequest,
    UpstreamFetchError,
)
from ...services.dispatcher import NotificationDispatcher
from ..deps import get_current_user

router = APIRouter(prefix="/cards", tags=["cards"])

RESULT_STATUS = {
    Delivered: 200,
    MalformedRequest: 400,
    AccessDenied: 403,
    DestinationNotFound: 404,
    DestinationLookupError: 500,
    UpstreamFetchError: 502,
    DeliveryError: 502,
}


class SendRequest(BaseModel):
    """Send-to-chat request model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    destination_id: str = Field(alias="webhookId")
    caption: Optional[str] = None


def get_dispatcher() -> NotificationDispatcher:
    """Get NotificationDispatcher from container."""
    return get_container().dispatcher


def result_to_response(result: DeliveryResult) -> JSONResponse:
    """Render a DeliveryResult as a JSON response."""
    body = {"ok": result.ok, "message": result.message}
    if not result.ok:
        body["error"] = result.error
        body["step"] = result.step
    status = getattr(result, "status", None)
    if status is not None:
        body["status"] = status
    return JSONResponse(status_code=RESULT_STATUS.get(type(result), 500), content=body)


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)


@router.post("/{card_id}/send")
async def send_card(
    card_id: str,
    request: Request,
    user: User = Depends(get_current_user),
) -> JSONResponse:
    """Send a card to a chat destination."""
    try:
        body = await request.json()
    except ValueError:
        return result_to_response(MalformedRequest(reason="Request body must be JSON"))

    try:
        send_request = SendRequest.model_validate(body)
    except ValidationError as e:
        return result_to_response(MalformedRequest(reason=_describe(e)))

    dispatcher = get_dispatcher()
    result = await dispatcher.send(
        card_id,
        send_request.destination_id,
        send_request.caption,
        user,
    )
    return result_to_response(result)
