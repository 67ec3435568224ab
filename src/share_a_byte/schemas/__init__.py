# src/share_a_byte/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .message import MessageCreate, MessageResponse
from .notification import (
    MessageReceivedMetadata,
    NotificationResponse,
    PostCompletedMetadata,
    SystemMetadata,
    VoteRequest,
    VoteResult,
)
from .post import PostComplete, PostCreate, PostResponse, PostUpdate
from .share_score import LeaderboardEntry, ScoreAdjustment, ShareScoreResponse
from .user import PublicUserResponse, UserCreate, UserResponse, UserUpdate

__all__ = [
    "MessageCreate", "MessageResponse",
    "MessageReceivedMetadata", "NotificationResponse", "PostCompletedMetadata",
    "SystemMetadata", "VoteRequest", "VoteResult",
    "PostComplete", "PostCreate", "PostResponse", "PostUpdate",
    "LeaderboardEntry", "ScoreAdjustment", "ShareScoreResponse",
    "PublicUserResponse", "UserCreate", "UserResponse", "UserUpdate",
]
