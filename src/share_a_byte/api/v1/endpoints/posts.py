# src/share_a_byte/api/v1/endpoints/posts.py
"""Post-related endpoints for the Share-a-Byte API."""

from fastapi import APIRouter, Query, Response, status

from share_a_byte.models import Post
from share_a_byte.schemas.post import (
    PostCategory,
    PostComplete,
    PostCreate,
    PostResponse,
    PostStatus,
    PostUpdate,
)
from share_a_byte.services import access
from share_a_byte.services import posts as post_service

from ..dependencies import CurrentUserDep, OptionalUserDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    current_user: OptionalUserDep,
    search: str | None = Query(None, description="Match title, description or location"),
    category: PostCategory | None = Query(None, description="Filter by category"),
    status_filter: PostStatus | None = Query(None, alias="status", description="Filter by status"),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of posts to return"),
    offset: int = Query(0, ge=0),
) -> list[Post]:
    """List posts visible to the caller, newest first."""
    return post_service.search_posts(
        db,
        current_user,
        search=search,
        category=category,
        status=status_filter,
        limit=limit,
        offset=offset,
    )


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Post:
    """Create a new listing owned by the caller."""
    return post_service.create_post(db, current_user, post_data)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, db: SessionDep, current_user: OptionalUserDep) -> Post:
    """Get a specific post by ID."""
    return access.get_scoped(db, current_user, Post, access.ACTION_READ, post_id)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    post_data: PostUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Post:
    """Edit a post owned by the caller."""
    return post_service.update_post(db, current_user, post_id, post_data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, current_user: CurrentUserDep, db: SessionDep) -> Response:
    """Delete a post owned by the caller."""
    post_service.delete_post(db, current_user, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/complete", response_model=PostResponse)
async def complete_post(
    post_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
    params: PostComplete | None = None,
) -> Post:
    """Archive a post and optionally notify the user who collected it."""
    recipient = params.recipient if params is not None else None
    return post_service.complete_post(db, current_user, post_id, recipient)
