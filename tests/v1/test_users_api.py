# mypy: ignore-errors
# tests/v1/test_users_api.py
"""Tests for sign-up and profile endpoints."""

from fastapi import status

from share_a_byte.core.security import create_access_token
from share_a_byte.models import ShareScore


def test_sign_up_seeds_share_score(client, db_session) -> None:
    """Signing up creates the account and its seeded score."""
    response = client.post(
        "/api/v1/users/",
        json={"email": "New@X.com", "first_name": "Nia"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["email"] == "new@x.com"
    assert data["roles"] == ["signed-in"]

    record = db_session.query(ShareScore).filter(ShareScore.user_id == data["id"]).one()
    assert record.score == 1000
    assert record.user_email == "new@x.com"


def test_sign_up_duplicate_email(client, test_user) -> None:
    """Emails are unique."""
    response = client.post("/api/v1/users/", json={"email": "a@x.com"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_sign_up_invalid_email(client) -> None:
    """Malformed emails fail request validation."""
    response = client.post("/api/v1/users/", json={"email": "not-an-email"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_me(client, auth_token, test_user) -> None:
    """The caller gets their full profile."""
    response = client.get("/api/v1/users/me", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "a@x.com"


def test_get_me_requires_auth(client) -> None:
    """An anonymous caller is unauthorized."""
    response = client.get("/api/v1/users/me")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_invalid_token_rejected(client) -> None:
    """A garbage token is unauthorized."""
    response = client.get("/api/v1/users/me", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_token_for_unknown_user_rejected(client) -> None:
    """A valid token naming no account is unauthorized."""
    token = create_access_token("ghost")
    response = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_update_email_syncs_share_score(client, db_session, auth_token, test_user) -> None:
    """Changing the email rewrites the score record's copy."""
    response = client.patch(
        "/api/v1/users/me",
        json={"email": "alice@x.com", "bio": "Cooks too much"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "alice@x.com"

    db_session.expire_all()
    record = db_session.query(ShareScore).filter(ShareScore.user_id == test_user.id).one()
    assert record.user_email == "alice@x.com"


def test_update_email_taken(client, auth_token, other_user) -> None:
    """An email belonging to someone else is rejected."""
    response = client.patch(
        "/api/v1/users/me",
        json={"email": "b@x.com"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_public_profile_hides_email(client, test_user) -> None:
    """Anyone can read a public profile without the email."""
    response = client.get(f"/api/v1/users/{test_user.id}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["first_name"] == "Alice"
    assert "email" not in data
