"""Notification inbox operations and vote resolution."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from share_a_byte.core.errors import RecordNotFoundError, ShareAByteError
from share_a_byte.core.settings import settings
from share_a_byte.models import Notification, User
from share_a_byte.schemas.notification import VoteResult
from share_a_byte.services import access
from share_a_byte.services.share_scores import apply_score_adjustment, get_score_for_user

logger = logging.getLogger(__name__)

VOTE_DIRECTIONS = {"upvote": 1, "downvote": -1}


def list_notifications(
    db: Session,
    actor: User,
    *,
    is_read: bool | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Notification]:
    """Return the actor's notifications, newest first."""
    query = access.scoped_query(db, actor, Notification, access.ACTION_READ)
    if is_read is not None:
        query = query.filter(Notification.is_read.is_(is_read))
    return query.order_by(Notification.created_at.desc()).offset(offset).limit(limit).all()


def get_notification(db: Session, actor: User, notification_id: str) -> Notification:
    """Return one notification addressed to the actor."""
    return access.get_scoped(db, actor, Notification, access.ACTION_READ, notification_id)


def mark_notification_read(db: Session, actor: User, notification_id: str) -> Notification:
    """Flag a notification as read; the only mutation besides deletion."""
    notification = access.get_scoped(
        db, actor, Notification, access.ACTION_UPDATE, notification_id
    )
    access.ensure_record_belongs_to(actor.id, notification, user_belongs_to_field="recipient")
    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return notification


def delete_notification(db: Session, actor: User, notification_id: str) -> None:
    """Delete a notification; only its recipient may do so."""
    notification = access.get_scoped(
        db, actor, Notification, access.ACTION_DELETE, notification_id
    )
    access.ensure_record_belongs_to(actor.id, notification, user_belongs_to_field="recipient")
    db.delete(notification)
    db.commit()


def vote_on_notification(
    db: Session,
    actor: User,
    notification_id: str,
    vote_type: str,
) -> VoteResult:
    """Resolve a vote on a notification into a score change for its sender.

    The sender's score is adjusted by the configured policy delta and the
    notification is deleted in the same transaction, so a notification can be
    voted on at most once. Any failure rolls both writes back and is reported
    in the result instead of being raised.

    Args:
        db: Database session
        actor: The notification's recipient casting the vote
        notification_id: Identifier of the notification being voted on
        vote_type: Either ``"upvote"`` or ``"downvote"``

    Returns:
        VoteResult describing the outcome.
    """
    direction = VOTE_DIRECTIONS.get(vote_type)
    if direction is None:
        return VoteResult(success=False, message="Vote type must be upvote or downvote")

    try:
        notification = access.get_scoped(
            db, actor, Notification, access.ACTION_DELETE, notification_id
        )
    except RecordNotFoundError:
        return VoteResult(success=False, message="Notification not found")
    except ShareAByteError as exc:
        return VoteResult(success=False, message=exc.message)

    if not notification.sender_id:
        return VoteResult(success=False, message="Notification has no sender")

    points = settings.vote_points[vote_type]
    try:
        sender_score = get_score_for_user(db, notification.sender_id)
        new_score = apply_score_adjustment(sender_score, points)
        access.ensure_record_belongs_to(actor.id, notification, user_belongs_to_field="recipient")
        db.delete(notification)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(
            "Error processing vote on notification %s (vote_type=%s)",
            notification_id,
            vote_type,
            exc_info=True,
        )
        return VoteResult(success=False, message="Failed to process vote")

    verb = "upvoted" if direction > 0 else "downvoted"
    return VoteResult(
        success=True,
        message=f"Successfully {verb} the notification",
        score_change=direction,
        points=points,
        new_score=new_score,
    )
