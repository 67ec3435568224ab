# src/share_a_byte/api/v1/endpoints/share_scores.py
"""Reputation score and leaderboard endpoints."""

from fastapi import APIRouter, Query

from share_a_byte.core.settings import settings
from share_a_byte.models import ShareScore
from share_a_byte.schemas.share_score import LeaderboardEntry, ScoreAdjustment, ShareScoreResponse
from share_a_byte.services import access
from share_a_byte.services import share_scores as score_service

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/share-scores", tags=["share-scores"])


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    db: SessionDep,
    limit: int | None = Query(None, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0),
) -> list[LeaderboardEntry]:
    """Return users ordered by share score, highest first."""
    rows = score_service.leaderboard(
        db,
        limit=limit or settings.leaderboard_page_size,
        offset=offset,
    )
    return [
        LeaderboardEntry(
            user_id=user.id,
            display_name=user.display_name,
            score=record.score,
            rank=record.rank,
        )
        for record, user in rows
    ]


@router.get("/me", response_model=ShareScoreResponse)
async def get_my_score(current_user: CurrentUserDep, db: SessionDep) -> ShareScore:
    """Return the caller's own score record."""
    access.require(current_user, ShareScore, access.ACTION_READ)
    return score_service.get_score_for_user(db, current_user.id)


@router.post("/{score_id}/update-from-vote", response_model=ShareScoreResponse)
async def update_score_from_vote(
    score_id: str,
    adjustment: ScoreAdjustment,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ShareScore:
    """Apply a signed point adjustment to a score record (admin only)."""
    access.require(current_user, ShareScore, access.ACTION_UPDATE)
    return score_service.update_score_from_vote(db, score_id, adjustment.point_adjustment)
