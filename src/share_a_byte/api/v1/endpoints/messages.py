# src/share_a_byte/api/v1/endpoints/messages.py
"""Direct message endpoints for the Share-a-Byte API."""

from fastapi import APIRouter, Query, Response, status

from share_a_byte.models import Message
from share_a_byte.schemas.message import MessageCreate, MessageResponse
from share_a_byte.services import messages as message_service

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    message_data: MessageCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Message:
    """Send a direct message to another user."""
    return message_service.send_message(db, current_user, message_data)


@router.get("/inbox", response_model=list[MessageResponse])
async def get_inbox(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> list[Message]:
    """Get messages received by the current user."""
    return message_service.list_inbox(db, current_user, limit=limit, offset=offset)


@router.get("/sent", response_model=list[MessageResponse])
async def get_sent_messages(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> list[Message]:
    """Get messages sent by the current user."""
    return message_service.list_sent(db, current_user, limit=limit, offset=offset)


@router.get("/conversation/{user_id}", response_model=list[MessageResponse])
async def get_conversation(
    user_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: int = Query(100, ge=1, le=200),
) -> list[Message]:
    """Get the thread between the current user and another user."""
    return message_service.list_conversation(db, current_user, user_id, limit=limit)


@router.post("/{message_id}/read", response_model=MessageResponse)
async def mark_message_read(
    message_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Message:
    """Mark a received message as read."""
    return message_service.mark_message_read(db, current_user, message_id)


@router.post("/{message_id}/archive", response_model=MessageResponse)
async def archive_message(
    message_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Message:
    """Archive a received message."""
    return message_service.archive_message(db, current_user, message_id)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    message_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Response:
    """Delete a received message."""
    message_service.delete_message(db, current_user, message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
