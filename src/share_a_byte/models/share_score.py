# src/share_a_byte/models/share_score.py
"""Reputation ledger kept one-to-one with users."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from share_a_byte.db.session import Base
from share_a_byte.db.time import new_id


class ShareScore(Base):
    """Per-user sharing score shown on the leaderboard."""

    __tablename__ = "share_score"
    __table_args__ = (
        CheckConstraint("score >= 0", name="ck_share_score_non_negative"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id"),
        nullable=False,
        unique=True,
    )
    # Copy of User.email; rewritten by the user service whenever the email changes.
    user_email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)

    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Computed by the ranking job, never by the vote path.
    rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    last_updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
