"""Declarative access filters.

Visibility and mutability rules live in one grant table keyed by role, model
and action. A grant is either ``True`` (unrestricted) or a builder that turns
the acting user's id into a SQL predicate. Anything not listed is denied.

The explicit :func:`ensure_record_belongs_to` cross-check is independent of
the grant table; handlers call it on the loaded record after the filtered load.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar, Union

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session
from sqlalchemy.sql.elements import ColumnElement

from share_a_byte.core.errors import AuthorizationError, RecordNotFoundError
from share_a_byte.models import Message, Notification, Post, ShareScore, User
from share_a_byte.models.post import POST_STATUS_DRAFT
from share_a_byte.models.user import ROLE_ADMIN, ROLE_SIGNED_IN, ROLE_UNAUTHENTICATED

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
FilterBuilder = Callable[[str | None], ColumnElement[bool]]
Grant = Union[bool, FilterBuilder]

ACTION_READ = "read"
ACTION_CREATE = "create"
ACTION_UPDATE = "update"
ACTION_DELETE = "delete"


def _message_party(actor_id: str | None) -> ColumnElement[bool]:
    return or_(Message.sender_id == actor_id, Message.recipient_id == actor_id)


def _message_recipient(actor_id: str | None) -> ColumnElement[bool]:
    return Message.recipient_id == actor_id


def _notification_recipient(actor_id: str | None) -> ColumnElement[bool]:
    return Notification.recipient_id == actor_id


def _post_published(actor_id: str | None) -> ColumnElement[bool]:
    return Post.status != POST_STATUS_DRAFT


def _post_published_or_owned(actor_id: str | None) -> ColumnElement[bool]:
    return or_(Post.status != POST_STATUS_DRAFT, Post.user_id == actor_id)


def _post_owner(actor_id: str | None) -> ColumnElement[bool]:
    return Post.user_id == actor_id


def _user_tenant(actor_id: str | None) -> ColumnElement[bool]:
    return User.id == actor_id


PERMISSIONS: dict[str, dict[type, dict[str, Grant]]] = {
    ROLE_SIGNED_IN: {
        Message: {
            ACTION_READ: _message_party,
            ACTION_CREATE: True,
            ACTION_UPDATE: _message_recipient,
            ACTION_DELETE: _message_recipient,
        },
        Notification: {
            ACTION_READ: _notification_recipient,
            ACTION_UPDATE: _notification_recipient,
            ACTION_DELETE: _notification_recipient,
        },
        Post: {
            ACTION_READ: _post_published_or_owned,
            ACTION_CREATE: True,
            ACTION_UPDATE: _post_owner,
            ACTION_DELETE: _post_owner,
        },
        ShareScore: {
            ACTION_READ: True,
        },
        User: {
            ACTION_READ: True,
            ACTION_UPDATE: _user_tenant,
        },
    },
    ROLE_ADMIN: {
        ShareScore: {
            ACTION_READ: True,
            ACTION_UPDATE: True,
        },
    },
    ROLE_UNAUTHENTICATED: {
        Post: {
            ACTION_READ: _post_published,
        },
        User: {
            ACTION_READ: True,
            ACTION_CREATE: True,
        },
    },
}


def roles_for(actor: User | None) -> list[str]:
    """Return the roles whose grants apply to the actor."""
    if actor is None:
        return [ROLE_UNAUTHENTICATED]
    return list(actor.roles or [ROLE_SIGNED_IN])


def resolve_grant(actor: User | None, model: type, action: str) -> Grant:
    """Combine the actor's role grants for one model/action pair.

    Returns ``True`` if any role grants unrestricted access, otherwise a
    builder OR-ing every applicable filter. Raises when no role grants it.
    """
    builders: list[FilterBuilder] = []
    for role in roles_for(actor):
        grant = PERMISSIONS.get(role, {}).get(model, {}).get(action, False)
        if grant is True:
            return True
        if callable(grant):
            builders.append(grant)

    if not builders:
        logger.warning(
            "Denied %s on %s for %s",
            action,
            model.__name__,
            actor.id if actor is not None else "anonymous",
        )
        raise AuthorizationError(
            f"You do not have permission to {action} {model.__name__.lower()} records"
        )
    if len(builders) == 1:
        return builders[0]

    def _any_of(actor_id: str | None) -> ColumnElement[bool]:
        return or_(*(builder(actor_id) for builder in builders))

    return _any_of


def require(actor: User | None, model: type, action: str) -> None:
    """Raise unless the actor holds some grant for the action."""
    resolve_grant(actor, model, action)


def scoped_query(db: Session, actor: User | None, model: type[ModelT], action: str) -> Query[Any]:
    """Return a query over ``model`` restricted to rows the actor may act on."""
    grant = resolve_grant(actor, model, action)
    query = db.query(model)
    if grant is True:
        return query
    actor_id = actor.id if actor is not None else None
    return query.filter(grant(actor_id))  # type: ignore[operator]


def get_scoped(
    db: Session,
    actor: User | None,
    model: type[ModelT],
    action: str,
    record_id: str,
) -> ModelT:
    """Load a single record through the access filter.

    Records hidden by the filter are reported as missing, so callers cannot
    probe for the existence of other users' data.
    """
    record = (
        scoped_query(db, actor, model, action)
        .filter(model.id == record_id)  # type: ignore[attr-defined]
        .first()
    )
    if record is None:
        raise RecordNotFoundError(model.__name__, record_id)
    return record


def ensure_record_belongs_to(
    actor_id: str | None,
    record: object,
    user_belongs_to_field: str = "user",
) -> None:
    """Explicit ownership cross-check against ``record.<field>_id``.

    Raises:
        AuthorizationError: If the actor is anonymous or not the named user.
    """
    owner_id = getattr(record, f"{user_belongs_to_field}_id")
    if actor_id is None or owner_id != actor_id:
        logger.warning(
            "Cross-user access blocked on %s %s (field=%s)",
            type(record).__name__,
            getattr(record, "id", None),
            user_belongs_to_field,
        )
        raise AuthorizationError(
            f"This {type(record).__name__.lower()} does not belong to you"
        )
