# mypy: ignore-errors
# tests/v1/test_share_scores_api.py
"""Tests for share score and leaderboard endpoints."""

from fastapi import status

from share_a_byte.services.share_scores import get_score_for_user


def test_get_my_score(client, auth_token, test_user) -> None:
    """A user can read their own score record."""
    response = client.get("/api/v1/share-scores/me", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["score"] == 1000
    assert data["user_email"] == "a@x.com"


def test_leaderboard_is_public(client, make_user) -> None:
    """The leaderboard lists users by score without authentication."""
    make_user("low@x.com", first_name="Low", score=10)
    make_user("high@x.com", first_name="High", score=700)

    response = client.get("/api/v1/share-scores/leaderboard")
    assert response.status_code == status.HTTP_200_OK
    assert [entry["display_name"] for entry in response.json()] == ["High", "Low"]


def test_leaderboard_respects_limit(client, make_user) -> None:
    """The limit parameter caps the page size."""
    for index in range(3):
        make_user(f"user{index}@x.com", score=index)

    response = client.get("/api/v1/share-scores/leaderboard", params={"limit": 2})
    assert len(response.json()) == 2


def test_update_from_vote_as_admin(
    client, db_session, admin_auth_token, test_user, score_of
) -> None:
    """Admins can apply an adjustment; the floor still applies."""
    record = get_score_for_user(db_session, test_user.id)

    response = client.post(
        f"/api/v1/share-scores/{record.id}/update-from-vote",
        json={"pointAdjustment": -5000},
        headers=admin_auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["score"] == 0
    assert score_of(test_user) == 0


def test_update_from_vote_forbidden_for_users(client, db_session, auth_token, test_user) -> None:
    """Ordinary users cannot adjust scores directly."""
    record = get_score_for_user(db_session, test_user.id)

    response = client.post(
        f"/api/v1/share-scores/{record.id}/update-from-vote",
        json={"pointAdjustment": 50},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["kind"] == "authorization"


def test_update_from_vote_unknown_record(client, admin_auth_token) -> None:
    """An unknown score id returns 404."""
    response = client.post(
        "/api/v1/share-scores/missing/update-from-vote",
        json={"pointAdjustment": 50},
        headers=admin_auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
