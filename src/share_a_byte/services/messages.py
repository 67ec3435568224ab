"""Direct messaging between the two parties of a pickup."""

from __future__ import annotations

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from share_a_byte.core.errors import DomainStateError, RecordNotFoundError, ValidationError
from share_a_byte.models import Message, Post, User
from share_a_byte.models.message import (
    MESSAGE_STATUS_ACTIVE,
    MESSAGE_STATUS_ARCHIVED,
)
from share_a_byte.schemas.message import MessageCreate
from share_a_byte.services import access


def send_message(db: Session, actor: User, data: MessageCreate) -> Message:
    """Create a message from ``actor`` to another user."""
    access.require(actor, Message, access.ACTION_CREATE)

    if data.recipient_id == actor.id:
        raise ValidationError("You cannot send a message to yourself")
    if db.get(User, data.recipient_id) is None:
        raise RecordNotFoundError("Recipient", data.recipient_id)
    if data.post_id is not None:
        access.get_scoped(db, actor, Post, access.ACTION_READ, data.post_id)

    message = Message(
        sender_id=actor.id,
        recipient_id=data.recipient_id,
        post_id=data.post_id,
        content=data.content,
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def list_inbox(db: Session, actor: User, *, limit: int = 50, offset: int = 0) -> list[Message]:
    """Return active messages received by the actor."""
    return (
        access.scoped_query(db, actor, Message, access.ACTION_READ)
        .filter(Message.recipient_id == actor.id, Message.status == MESSAGE_STATUS_ACTIVE)
        .order_by(Message.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def list_sent(db: Session, actor: User, *, limit: int = 50, offset: int = 0) -> list[Message]:
    """Return active messages sent by the actor."""
    return (
        access.scoped_query(db, actor, Message, access.ACTION_READ)
        .filter(Message.sender_id == actor.id, Message.status == MESSAGE_STATUS_ACTIVE)
        .order_by(Message.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def list_conversation(
    db: Session,
    actor: User,
    counterpart_id: str,
    *,
    limit: int = 100,
) -> list[Message]:
    """Return the active thread between the actor and one counterpart, oldest first."""
    return (
        access.scoped_query(db, actor, Message, access.ACTION_READ)
        .filter(
            or_(
                and_(Message.sender_id == actor.id, Message.recipient_id == counterpart_id),
                and_(Message.sender_id == counterpart_id, Message.recipient_id == actor.id),
            ),
            Message.status == MESSAGE_STATUS_ACTIVE,
        )
        .order_by(Message.created_at.asc())
        .limit(limit)
        .all()
    )


def mark_message_read(db: Session, actor: User, message_id: str) -> Message:
    """Flip the read flag; only the recipient may do this."""
    message = access.get_scoped(db, actor, Message, access.ACTION_UPDATE, message_id)
    access.ensure_record_belongs_to(actor.id, message, user_belongs_to_field="recipient")
    message.read = True
    db.commit()
    db.refresh(message)
    return message


def archive_message(db: Session, actor: User, message_id: str) -> Message:
    """Logically hide an active message from both parties' inbox listings."""
    message = access.get_scoped(db, actor, Message, access.ACTION_UPDATE, message_id)
    access.ensure_record_belongs_to(actor.id, message, user_belongs_to_field="recipient")
    if message.status != MESSAGE_STATUS_ACTIVE:
        raise DomainStateError(f"Message is already {message.status}")
    message.status = MESSAGE_STATUS_ARCHIVED
    db.commit()
    db.refresh(message)
    return message


def delete_message(db: Session, actor: User, message_id: str) -> None:
    """Hard-delete a message; only its recipient may do so."""
    message = access.get_scoped(db, actor, Message, access.ACTION_DELETE, message_id)
    access.ensure_record_belongs_to(actor.id, message, user_belongs_to_field="recipient")
    db.delete(message)
    db.commit()
