"""Authentication routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...container import get_container
from ...domain.errors import CardRelayError
from ...domain.models import User
from ...services.auth_service import AuthService
from ..deps import get_current_user, to_http_error
from .schemas import UserResponse, user_to_response

router = APIRouter(prefix="/auth", tags=["auth"])


class RegisterRequest(BaseModel):
    """Registration request model."""

    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Login request model."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response model."""

    token: str
    user: UserResponse


def get_auth_service() -> AuthService:
    """Get AuthService from container."""
    return get_container().auth_service


@router.post("/register", status_code=201)
async def register(request: RegisterRequest) -> dict:
    """Register a new member account."""
    service = get_auth_service()
    try:
        await service.register(request.name, request.email, request.password)
    except CardRelayError as e:
        raise to_http_error(e)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest) -> LoginResponse:
    """Exchange email and password for a token."""
    service = get_auth_service()
    try:
        token, user = await service.login(request.email, request.password)
    except CardRelayError as e:
        raise to_http_error(e)
    return LoginResponse(token=token, user=user_to_response(user))


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    """Get the current user."""
    return user_to_response(user)
