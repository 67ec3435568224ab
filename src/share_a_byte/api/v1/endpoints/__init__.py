# src/share_a_byte/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .messages import router as messages_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .share_scores import router as share_scores_router
from .users import router as users_router

__all__ = [
    "messages_router",
    "notifications_router",
    "posts_router",
    "share_scores_router",
    "users_router",
]
