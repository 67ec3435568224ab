# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-share-a-byte")

from share_a_byte.core.security import create_access_token  # noqa: E402
from share_a_byte.db.session import Base  # noqa: E402
from share_a_byte.db.session import get_db as app_get_session  # noqa: E402
from share_a_byte.main import app as fastapi_app  # noqa: E402
from share_a_byte.models import Notification, Post, ShareScore, User  # noqa: E402
from share_a_byte.models.user import ROLE_ADMIN, ROLE_SIGNED_IN  # noqa: E402
from share_a_byte.schemas.notification import PostCompletedMetadata, dump_metadata  # noqa: E402

TEST_DB_URL = "sqlite://"
SEED_SCORE = 1000


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting a user together with its share score."""

    def _make_user(
        email: str,
        *,
        first_name: str | None = None,
        roles: list[str] | None = None,
        score: int | None = SEED_SCORE,
    ) -> User:
        user = User(
            email=email,
            first_name=first_name,
            roles=roles or [ROLE_SIGNED_IN],
        )
        db_session.add(user)
        db_session.flush()
        if score is not None:
            db_session.add(ShareScore(user_id=user.id, user_email=email, score=score))
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return the primary test user (the post owner)."""
    return make_user("a@x.com", first_name="Alice")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second user (the food collector)."""
    return make_user("b@x.com", first_name="Bob")


@pytest.fixture()
def admin_user(make_user: Callable[..., User]) -> User:
    """Create and return a user holding the admin role."""
    return make_user("admin@x.com", roles=[ROLE_SIGNED_IN, ROLE_ADMIN], score=None)


def _headers_for(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return _headers_for(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return _headers_for(other_user)


@pytest.fixture()
def admin_auth_token(admin_user: User) -> dict[str, str]:
    """Return authorization headers for the admin user."""
    return _headers_for(admin_user)


@pytest.fixture()
def test_post(db_session: Session, test_user: User) -> Post:
    """Create an active post owned by the primary test user."""
    post = Post(
        user_id=test_user.id,
        title="Lasagna",
        description="Half a tray of vegetable lasagna",
        category="leftovers",
        location="Elm Street 4",
        go_bad_date=datetime(2030, 1, 1, tzinfo=UTC),
        food_allergens="gluten, dairy",
    )
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post


@pytest.fixture()
def completion_notification(
    db_session: Session,
    test_post: Post,
    test_user: User,
    other_user: User,
) -> Notification:
    """A post_completed notification sent by the owner to the collector."""
    notification = Notification(
        content=f'The food sharing post "{test_post.title}" has been archived.',
        type="post_completed",
        sender_id=test_user.id,
        recipient_id=other_user.id,
        related_post_id=test_post.id,
        metadata_=dump_metadata(PostCompletedMetadata(post_title=test_post.title)),
    )
    db_session.add(notification)
    db_session.commit()
    db_session.refresh(notification)
    return notification


@pytest.fixture()
def score_of(db_session: Session) -> Callable[[User], int]:
    """Return a reader for a user's current persisted score."""

    def _score_of(user: User) -> int:
        db_session.expire_all()
        record = db_session.query(ShareScore).filter(ShareScore.user_id == user.id).one()
        return record.score

    return _score_of
