# src/share_a_byte/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    messages_router,
    notifications_router,
    posts_router,
    share_scores_router,
    users_router,
)

__all__ = [
    "messages_router",
    "notifications_router",
    "posts_router",
    "share_scores_router",
    "users_router",
]
