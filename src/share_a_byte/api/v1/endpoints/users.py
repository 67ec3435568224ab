# src/share_a_byte/api/v1/endpoints/users.py
"""Account sign-up and profile endpoints."""

from fastapi import APIRouter, status

from share_a_byte.models import User
from share_a_byte.schemas.user import PublicUserResponse, UserCreate, UserResponse, UserUpdate
from share_a_byte.services import access
from share_a_byte.services import users as user_service

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(user_data: UserCreate, db: SessionDep) -> User:
    """Create an account and seed its share score."""
    return user_service.sign_up(db, user_data)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUserDep) -> User:
    """Return the caller's full profile."""
    return current_user


@router.patch("/me", response_model=UserResponse)
async def update_me(
    update_data: UserUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> User:
    """Update the caller's own profile."""
    return user_service.update_user(db, current_user, update_data)


@router.get("/{user_id}", response_model=PublicUserResponse)
async def get_user(user_id: str, db: SessionDep, current_user: OptionalUserDep) -> User:
    """Return another user's public profile."""
    return access.get_scoped(db, current_user, User, access.ACTION_READ, user_id)
