"""Post lifecycle: creation, owner edits and the complete action."""

from __future__ import annotations

import logging

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from share_a_byte.core.errors import (
    DependencyError,
    DomainStateError,
    ValidationError,
)
from share_a_byte.models import Notification, Post, User
from share_a_byte.models.notification import NOTIFICATION_TYPE_POST_COMPLETED
from share_a_byte.models.post import POST_STATUS_ARCHIVED, POST_STATUSES
from share_a_byte.models.user import normalize_email
from share_a_byte.schemas.notification import PostCompletedMetadata, dump_metadata
from share_a_byte.schemas.post import PostCreate, PostUpdate
from share_a_byte.services import access

logger = logging.getLogger(__name__)


def create_post(db: Session, actor: User, data: PostCreate) -> Post:
    """Persist a new listing owned by ``actor``."""
    access.require(actor, Post, access.ACTION_CREATE)
    post = Post(user_id=actor.id, **data.model_dump())
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def search_posts(
    db: Session,
    actor: User | None,
    *,
    search: str | None = None,
    category: str | None = None,
    status: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Post]:
    """Return visible posts matching an optional free-text term and filters."""
    query = access.scoped_query(db, actor, Post, access.ACTION_READ)
    if search:
        pattern = f"%{search.strip()}%"
        query = query.filter(
            or_(
                Post.title.ilike(pattern),
                Post.description.ilike(pattern),
                Post.location.ilike(pattern),
            )
        )
    if category:
        query = query.filter(Post.category == category)
    if status:
        query = query.filter(Post.status == status)
    return query.order_by(Post.created_at.desc()).offset(offset).limit(limit).all()


def _check_forward_transition(current: str, requested: str) -> None:
    if POST_STATUSES.index(requested) < POST_STATUSES.index(current):
        raise DomainStateError(f"A post cannot move from {current} back to {requested}")


def update_post(db: Session, actor: User, post_id: str, data: PostUpdate) -> Post:
    """Apply owner edits to a post; status may only move forward."""
    post = access.get_scoped(db, actor, Post, access.ACTION_READ, post_id)
    access.ensure_record_belongs_to(actor.id, post)

    changes = data.model_dump(exclude_unset=True)
    if "status" in changes and changes["status"] is not None:
        _check_forward_transition(post.status, changes["status"])
    for key in ("title", "description"):
        if key in changes and changes[key] is None:
            raise ValidationError(f"{key} is required")

    for key, value in changes.items():
        if key == "status" and value is None:
            continue
        setattr(post, key, value)
    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, actor: User, post_id: str) -> None:
    """Hard-delete a post owned by ``actor``."""
    post = access.get_scoped(db, actor, Post, access.ACTION_READ, post_id)
    access.ensure_record_belongs_to(actor.id, post)
    db.delete(post)
    db.commit()


def build_completion_snapshot(post: Post) -> PostCompletedMetadata:
    """Copy the post's descriptive fields as they are right now."""
    return PostCompletedMetadata(
        post_title=post.title or None,
        post_description=post.description or None,
        post_category=post.category or None,
        location=post.location or None,
        go_bad_date=post.go_bad_date.isoformat() if post.go_bad_date else None,
        food_allergens=post.food_allergens or None,
    )


def _find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def _notify_recipient(db: Session, post: Post, recipient: User) -> Notification | None:
    """Create the post_completed notification; failures are logged, not raised."""
    try:
        notification = Notification(
            content=f'The food sharing post "{post.title}" has been archived.',
            type=NOTIFICATION_TYPE_POST_COMPLETED,
            is_read=False,
            sender_id=post.user_id,
            recipient_id=recipient.id,
            related_post_id=post.id,
            metadata_=dump_metadata(build_completion_snapshot(post)),
        )
        db.add(notification)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(
            "Failed to create notification for completed post %s",
            post.id,
            exc_info=True,
        )
        return None

    logger.info(
        "Created notification for user %s about completed post %s",
        recipient.id,
        post.id,
    )
    return notification


def complete_post(
    db: Session,
    actor: User,
    post_id: str,
    recipient: str | None = None,
) -> Post:
    """Archive a post and, when a recipient email is given, notify that user.

    Every precondition is checked before the post is touched, so a rejected
    call leaves the post exactly as it was. The notification is a best-effort
    side effect committed separately from the status change.

    Args:
        db: Database session
        actor: The authenticated user performing the action
        post_id: Identifier of the post to archive
        recipient: Optional email of the user who collected the food

    Returns:
        The archived post.

    Raises:
        RecordNotFoundError: If the post is not visible to the actor.
        AuthorizationError: If the actor does not own the post.
        DomainStateError: If the post is already archived.
        ValidationError: If the recipient email matches no user, or the actor.
        DependencyError: If the status change cannot be persisted.
    """
    post = access.get_scoped(db, actor, Post, access.ACTION_READ, post_id)
    access.ensure_record_belongs_to(actor.id, post)

    if post.is_archived:
        raise DomainStateError("This post is already archived")

    recipient_user: User | None = None
    if recipient:
        recipient_user = _find_user_by_email(db, recipient)
        if recipient_user is None:
            raise ValidationError(
                f"No user found with email {recipient}. Please provide a valid email."
            )
        if recipient_user.id == actor.id:
            raise ValidationError("You cannot name yourself as the recipient of your own post")
        logger.info("Verified recipient %s exists in the user database", recipient)

    post.status = POST_STATUS_ARCHIVED
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to archive post %s", post_id, exc_info=True)
        raise DependencyError(f"Could not archive post {post_id}") from exc
    db.refresh(post)

    if recipient_user is not None:
        _notify_recipient(db, post, recipient_user)
    return post
