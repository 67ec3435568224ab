# src/share_a_byte/models/message.py
"""Models describing direct messages between users."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from share_a_byte.db.session import Base
from share_a_byte.db.time import new_id, utcnow

MESSAGE_STATUS_ACTIVE = "active"
MESSAGE_STATUS_ARCHIVED = "archived"
MESSAGE_STATUS_DELETED = "deleted"


class Message(Base):
    """Plain-text message exchanged between two users, optionally about a post."""

    __tablename__ = "message"
    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'archived', 'deleted')",
            name="ck_message_status",
        ),
        Index("ix_message_sender_recipient", "sender_id", "recipient_id"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Both parties are fixed at creation time.
    sender_id: Mapped[str] = mapped_column(String(36), ForeignKey("user_account.id"), nullable=False)
    recipient_id: Mapped[str] = mapped_column(String(36), ForeignKey("user_account.id"), nullable=False)
    post_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("post.id", ondelete="SET NULL"),
        nullable=True,
    )

    read: Mapped[bool] = mapped_column(default=False, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=MESSAGE_STATUS_ACTIVE)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
