"""Account sign-up and profile maintenance."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from share_a_byte.core.errors import ValidationError
from share_a_byte.core.settings import settings
from share_a_byte.db.time import utcnow
from share_a_byte.models import ShareScore, User
from share_a_byte.models.user import normalize_email
from share_a_byte.schemas.user import UserCreate, UserUpdate
from share_a_byte.services import access
from share_a_byte.services.share_scores import seed_score

__all__ = [
    "sign_up",
    "update_user",
]

logger = logging.getLogger(__name__)


def _email_taken(db: Session, email: str, *, exclude_user_id: str | None = None) -> bool:
    query = db.query(User).filter(User.email == email)
    if exclude_user_id is not None:
        query = query.filter(User.id != exclude_user_id)
    return db.query(query.exists()).scalar()


def sign_up(db: Session, data: UserCreate) -> User:
    """Create an account together with its seeded share score.

    Both rows are committed together so no user ever exists without a score.
    """
    access.require(None, User, access.ACTION_CREATE)
    email = normalize_email(data.email)
    if _email_taken(db, email):
        raise ValidationError(f"An account with email {email} already exists")

    user = User(**data.model_dump(exclude={"email"}), email=email, last_signed_in=utcnow())
    db.add(user)
    db.flush()
    seed_score(db, user, settings.share_score_seed)
    db.commit()
    db.refresh(user)
    logger.info(
        "Created shareScore for user %s with default score of %d",
        user.id,
        settings.share_score_seed,
    )
    return user


def update_user(db: Session, actor: User, update_data: UserUpdate) -> User:
    """Apply partial profile updates to the actor's own account.

    An email change is copied onto the user's share score in the same
    transaction.
    """
    db_user = access.get_scoped(db, actor, User, access.ACTION_UPDATE, actor.id)
    update_dict = update_data.model_dump(exclude_unset=True)

    if "email" in update_dict:
        if update_dict["email"] is None:
            raise ValidationError("email is required")
        email = normalize_email(update_dict["email"])
        if _email_taken(db, email, exclude_user_id=db_user.id):
            raise ValidationError(f"An account with email {email} already exists")
        update_dict["email"] = email
        db.query(ShareScore).filter(ShareScore.user_id == db_user.id).update(
            {ShareScore.user_email: email},
            synchronize_session="fetch",
        )

    for key, value in update_dict.items():
        setattr(db_user, key, value)

    db.commit()
    db.refresh(db_user)
    return db_user
