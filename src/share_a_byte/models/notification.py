# src/share_a_byte/models/notification.py
"""Models for alerts delivered to a single recipient."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from share_a_byte.db.session import Base
from share_a_byte.db.time import new_id, utcnow

NOTIFICATION_TYPE_POST_COMPLETED = "post_completed"
NOTIFICATION_TYPE_MESSAGE_RECEIVED = "message_received"
NOTIFICATION_TYPE_SYSTEM = "system"

NOTIFICATION_TYPES = (
    NOTIFICATION_TYPE_POST_COMPLETED,
    NOTIFICATION_TYPE_MESSAGE_RECEIVED,
    NOTIFICATION_TYPE_SYSTEM,
)


class Notification(Base):
    """Typed alert addressed to a recipient, optionally naming a sender.

    Note:
        The JSON payload is exposed as ``metadata_`` because ``metadata`` is
        reserved by ``DeclarativeBase``; the column itself is named ``metadata``.
    """

    __tablename__ = "notification"
    __table_args__ = (
        CheckConstraint(
            "type IN (" + ", ".join(f"'{value}'" for value in NOTIFICATION_TYPES) + ")",
            name="ck_notification_type",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    is_read: Mapped[bool] = mapped_column(default=False, nullable=False)
    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        name="metadata",
    )

    recipient_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id"),
        nullable=False,
        index=True,
    )
    sender_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("user_account.id"), nullable=True)
    # Loose reference; the post may be deleted later.
    related_post_id: Mapped[str | None] = mapped_column(String(36), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
