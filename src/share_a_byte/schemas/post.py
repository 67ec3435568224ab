"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PostCategory = Literal["leftovers", "perishables"]
PostStatus = Literal["Draft", "Active", "Archived"]


class PostCreate(BaseModel):
    """Schema for creating a new listing."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    category: PostCategory | None = None
    location: str | None = Field(None, max_length=500)
    go_bad_date: datetime | None = Field(None, description="When the food expires")
    food_allergens: str | None = Field(None, max_length=500)
    images: list[str] | None = Field(None, description="Opaque image references")
    status: Literal["Draft", "Active"] = Field("Active", description="Initial lifecycle state")


class PostUpdate(BaseModel):
    """Schema for owner edits; status may only move forward."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1, max_length=5000)
    category: PostCategory | None = None
    location: str | None = Field(None, max_length=500)
    go_bad_date: datetime | None = None
    food_allergens: str | None = Field(None, max_length=500)
    images: list[str] | None = None
    status: Literal["Draft", "Active"] | None = Field(
        None,
        description="Archiving goes through the complete action",
    )


class PostComplete(BaseModel):
    """Parameters of the complete action."""

    recipient: str | None = Field(
        None,
        description="Email of the user who picked the food up",
    )


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    user_id: str
    title: str
    description: str
    category: str | None
    location: str | None
    go_bad_date: datetime | None
    food_allergens: str | None
    images: list[str] | None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
