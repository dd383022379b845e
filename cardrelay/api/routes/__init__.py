"""API route modules."""

from .auth import router as auth_router
from .boards import router as boards_router
from .cards import router as cards_router
from .destinations import router as destinations_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "boards_router",
    "cards_router",
    "destinations_router",
    "users_router",
]
