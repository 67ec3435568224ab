# src/share_a_byte/api/v1/endpoints/notifications.py
"""Notification inbox and voting endpoints."""

from fastapi import APIRouter, Query, Response, status

from share_a_byte.models import Notification
from share_a_byte.schemas.notification import NotificationResponse, VoteRequest, VoteResult
from share_a_byte.services import notifications as notification_service

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationResponse])
async def list_notifications(
    current_user: CurrentUserDep,
    db: SessionDep,
    is_read: bool | None = Query(None, description="Filter by read status"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
) -> list[Notification]:
    """List the caller's notifications, newest first."""
    return notification_service.list_notifications(
        db, current_user, is_read=is_read, limit=limit, offset=offset
    )


@router.post("/vote", response_model=VoteResult)
async def vote_on_notification(
    vote: VoteRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VoteResult:
    """Up- or downvote the sender of a notification and consume it."""
    return notification_service.vote_on_notification(
        db, current_user, vote.notification_id, vote.vote_type
    )


@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(
    notification_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Notification:
    """Get one of the caller's notifications."""
    return notification_service.get_notification(db, current_user, notification_id)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Notification:
    """Mark a notification as read."""
    return notification_service.mark_notification_read(db, current_user, notification_id)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Response:
    """Delete a notification addressed to the caller."""
    notification_service.delete_notification(db, current_user, notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
