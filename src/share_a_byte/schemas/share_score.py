"""Share score and leaderboard schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ShareScoreResponse(BaseModel):
    """A user's reputation record."""

    id: str
    user_id: str
    user_email: str
    score: int
    rank: int | None
    last_updated: datetime | None

    model_config = ConfigDict(from_attributes=True)


class LeaderboardEntry(BaseModel):
    """One row of the public leaderboard."""

    user_id: str
    display_name: str
    score: int
    rank: int | None


class ScoreAdjustment(BaseModel):
    """Parameters of the updateScoreFromVote action."""

    point_adjustment: int = Field(..., description="Signed number of points to apply")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
