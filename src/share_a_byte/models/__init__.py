# src/share_a_byte/models/__init__.py
"""SQLAlchemy models for the Share-a-Byte application."""

from .message import Message
from .notification import Notification
from .post import Post
from .share_score import ShareScore
from .user import User

__all__ = [
    "Message",
    "Notification",
    "Post",
    "ShareScore",
    "User",
]
