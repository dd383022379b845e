"""Shared route dependencies."""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from ..container import get_container
from ..domain.errors import (
    AuthenticationError,
    CardRelayError,
    ConfigurationError,
    ConflictError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
)
from ..domain.models import User

_ERROR_STATUS = {
    InvalidRequestError: 400,
    AuthenticationError: 401,
    PermissionDeniedError: 403,
    NotFoundError: 404,
    ConflictError: 400,
    ConfigurationError: 500,
}


def to_http_error(error: CardRelayError) -> HTTPException:
    """Convert a service error to an HTTPException."""
    for error_type, status in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            return HTTPException(status, str(error))
    return HTTPException(500, str(error))


async def get_current_user(authorization: Optional[str] = Header(None)) -> User:
    """Resolve the Bearer token in the Authorization header to a user."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(401, "Access denied. No token provided.")

    token = authorization[7:].strip()
    service = get_container().auth_service
    try:
        return await service.authenticate(token)
    except CardRelayError as e:
        raise to_http_error(e)


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require the current user to be an admin."""
    if not get_container().access_policy.can_manage(user):
        raise HTTPException(403, "Access denied. Admin privileges required.")
    return user
