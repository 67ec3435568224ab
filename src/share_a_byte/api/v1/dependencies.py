"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from share_a_byte.core.security import decode_subject
from share_a_byte.db.session import get_db
from share_a_byte.models import User

# HTTP Bearer scheme for JWT authentication; anonymous requests are allowed
# through so that public routes can share the same dependency.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
CredentialsDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_optional_user(credentials: CredentialsDep, db: SessionDep) -> User | None:
    """Resolve the acting user from a bearer token, or None when anonymous.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        db: Database session

    Returns:
        User object for the authenticated user, or None

    Raises:
        HTTPException: If a token was sent but is invalid or names no user
    """
    if credentials is None:
        return None

    subject = decode_subject(credentials.credentials)
    if subject is None:
        raise _unauthorized("Could not validate credentials")

    user = db.get(User, subject)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_current_user(user: Annotated[User | None, Depends(get_optional_user)]) -> User:
    """Require an authenticated user.

    Raises:
        HTTPException: If the request carries no bearer token
    """
    if user is None:
        raise _unauthorized("Not authenticated")
    return user


# Type aliases for current user dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]
