"""API Routes for Curator."""

from .collections_router import router as collections_router
from .membership_router import router as membership_router
from .recommendations_router import router as recommendations_router
from .users_router import router as users_router

__all__ = [
    "collections_router",
    "membership_router",
    "recommendations_router",
    "users_router",
]
