# mypy: ignore-errors
# tests/v1/test_notifications_api.py
"""Tests for notification inbox and vote endpoints."""

from fastapi import status

from share_a_byte.models import Notification


def test_list_notifications(client, other_auth_token, completion_notification) -> None:
    """The recipient sees the notification with its camelCase snapshot."""
    response = client.get("/api/v1/notifications/", headers=other_auth_token)
    assert response.status_code == status.HTTP_200_OK
    [item] = response.json()
    assert item["id"] == completion_notification.id
    assert item["metadata"]["type"] == "post_completed"
    assert item["metadata"]["postTitle"] == "Lasagna"


def test_list_notifications_hidden_from_sender(
    client, auth_token, completion_notification
) -> None:
    """The sender does not see notifications addressed to someone else."""
    response = client.get("/api/v1/notifications/", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_mark_notification_read(client, other_auth_token, completion_notification) -> None:
    """Marking as read flips the flag and filters by read state."""
    response = client.post(
        f"/api/v1/notifications/{completion_notification.id}/read",
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["is_read"] is True

    unread = client.get(
        "/api/v1/notifications/", params={"is_read": False}, headers=other_auth_token
    )
    assert unread.json() == []


def test_delete_notification_by_recipient(
    client, db_session, other_auth_token, completion_notification
) -> None:
    """The recipient may delete a notification."""
    response = client.delete(
        f"/api/v1/notifications/{completion_notification.id}",
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert db_session.query(Notification).count() == 0


def test_delete_notification_by_sender(
    client, db_session, auth_token, completion_notification
) -> None:
    """Anyone else gets a not-found and the notification survives."""
    response = client.delete(
        f"/api/v1/notifications/{completion_notification.id}",
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert db_session.query(Notification).count() == 1


def test_vote_upvote(client, other_auth_token, test_user, completion_notification, score_of) -> None:
    """Voting returns the camelCase result and credits the sender."""
    response = client.post(
        "/api/v1/notifications/vote",
        json={"notificationId": completion_notification.id, "voteType": "upvote"},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["success"] is True
    assert body["scoreChange"] == 1
    assert body["points"] == 50
    assert body["newScore"] == 1050
    assert score_of(test_user) == 1050


def test_vote_unknown_notification(client, other_auth_token) -> None:
    """Failures are reported in the body, not as HTTP errors."""
    response = client.post(
        "/api/v1/notifications/vote",
        json={"notificationId": "missing", "voteType": "downvote"},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["success"] is False
    assert response.json()["message"] == "Notification not found"


def test_vote_invalid_type(client, other_auth_token, completion_notification) -> None:
    """An unknown vote type fails request validation."""
    response = client.post(
        "/api/v1/notifications/vote",
        json={"notificationId": completion_notification.id, "voteType": "maybe"},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_vote_requires_auth(client, completion_notification) -> None:
    """Voting requires a bearer token."""
    response = client.post(
        "/api/v1/notifications/vote",
        json={"notificationId": completion_notification.id, "voteType": "upvote"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
