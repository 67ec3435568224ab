# src/share_a_byte/db/time.py
"""Time and identifier utilities for database models."""

from datetime import UTC, datetime
from uuid import uuid4


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def new_id() -> str:
    """Return a fresh opaque record identifier."""
    return str(uuid4())
