# src/share_a_byte/models/user.py
"""SQLAlchemy model for platform accounts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from share_a_byte.db.session import Base
from share_a_byte.db.time import new_id, utcnow

ROLE_SIGNED_IN = "signed-in"
ROLE_ADMIN = "admin"
ROLE_UNAUTHENTICATED = "unauthenticated"


def _default_roles() -> list[str]:
    return [ROLE_SIGNED_IN]


def normalize_email(email: str) -> str:
    """Return the canonical stored form of an email address."""
    return email.strip().lower()


class User(Base):
    """Account identity referenced by posts, messages, notifications and scores."""

    __tablename__ = "user_account"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    dietary_preferences: Mapped[str | None] = mapped_column(Text, nullable=True)
    allergies: Mapped[str | None] = mapped_column(Text, nullable=True)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=_default_roles)
    last_signed_in: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def display_name(self) -> str:
        """Return a human-readable name, falling back to the email address."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.email
