# src/share_a_byte/models/post.py
"""SQLAlchemy model for shareable food listings."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from share_a_byte.db.session import Base
from share_a_byte.db.time import new_id, utcnow

POST_STATUS_DRAFT = "Draft"
POST_STATUS_ACTIVE = "Active"
POST_STATUS_ARCHIVED = "Archived"

# Statuses in lifecycle order; a post only ever moves to the right.
POST_STATUSES = (POST_STATUS_DRAFT, POST_STATUS_ACTIVE, POST_STATUS_ARCHIVED)

POST_CATEGORIES = ("leftovers", "perishables")


class Post(Base):
    """Listing of surplus food or items offered by its owner."""

    __tablename__ = "post"
    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{value}'" for value in POST_STATUSES) + ")",
            name="ck_post_status",
        ),
        CheckConstraint(
            "category IS NULL OR category IN ("
            + ", ".join(f"'{value}'" for value in POST_CATEGORIES)
            + ")",
            name="ck_post_category",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("user_account.id"), nullable=False, index=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(String(32), nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    go_bad_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    food_allergens: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Opaque references to externally stored images.
    images: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default=POST_STATUS_ACTIVE)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )

    @property
    def is_archived(self) -> bool:
        """Return True once the post reached its terminal state."""
        return self.status == POST_STATUS_ARCHIVED
