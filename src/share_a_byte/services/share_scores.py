"""Reputation score arithmetic and leaderboard maintenance."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from share_a_byte.core.errors import DependencyError, RecordNotFoundError
from share_a_byte.db.time import utcnow
from share_a_byte.models import ShareScore, User

logger = logging.getLogger(__name__)

SCORE_FLOOR = 0


def adjust_score(current: int | None, delta: int) -> int:
    """Return ``current + delta`` clamped at zero.

    The clamp is lossy: ``adjust_score(adjust_score(5, -50), 50)`` is 50, not 5.
    """
    return max(SCORE_FLOOR, (current or 0) + delta)


def apply_score_adjustment(
    record: ShareScore,
    delta: int,
    *,
    now: datetime | None = None,
) -> int:
    """Apply ``delta`` to a score record in place and stamp ``last_updated``.

    The caller owns the transaction; nothing is flushed here.

    Returns:
        The new score.
    """
    previous = record.score
    record.score = adjust_score(previous, delta)
    record.last_updated = now or utcnow()
    logger.info(
        "ShareScore %s adjusted by %+d: %s -> %s",
        record.id,
        delta,
        previous if previous is not None else 0,
        record.score,
    )
    return record.score


def get_score_for_user(db: Session, user_id: str) -> ShareScore:
    """Return the single score record owned by ``user_id``.

    Raises:
        DependencyError: If the user has no score record; every account is
            seeded with one at sign-up.
    """
    record = db.query(ShareScore).filter(ShareScore.user_id == user_id).first()
    if record is None:
        raise DependencyError(f"No share score exists for user {user_id}")
    return record


def update_score_from_vote(db: Session, score_id: str, point_adjustment: int) -> ShareScore:
    """Apply a point adjustment to one score record and commit it."""
    record = db.get(ShareScore, score_id)
    if record is None:
        raise RecordNotFoundError("ShareScore", score_id)
    apply_score_adjustment(record, point_adjustment)
    db.commit()
    db.refresh(record)
    return record


def seed_score(db: Session, user: User, seed: int) -> ShareScore:
    """Create the initial score record for a freshly signed-up user."""
    record = ShareScore(
        user_id=user.id,
        user_email=user.email,
        score=seed,
        last_updated=utcnow(),
    )
    db.add(record)
    return record


def leaderboard(db: Session, *, limit: int, offset: int = 0) -> list[tuple[ShareScore, User]]:
    """Return score records with their users, highest score first."""
    return (
        db.query(ShareScore, User)
        .join(User, User.id == ShareScore.user_id)
        .order_by(ShareScore.score.desc(), User.email.asc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def recompute_ranks(db: Session) -> int:
    """Assign dense ranks by descending score; equal scores share a rank.

    Returns:
        Number of score records ranked.
    """
    records = db.query(ShareScore).order_by(ShareScore.score.desc()).all()
    rank = 0
    previous_score: int | None = None
    for record in records:
        if record.score != previous_score:
            rank += 1
            previous_score = record.score
        record.rank = rank
    db.commit()
    logger.info("Recomputed ranks for %d share scores", len(records))
    return len(records)
