"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for signing up a new account."""

    email: EmailStr = Field(..., description="Unique account email")
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=2000)
    dietary_preferences: str | None = Field(None, max_length=500)
    allergies: str | None = Field(None, max_length=500)


class UserUpdate(BaseModel):
    """Schema for partial profile updates by the account owner."""

    email: EmailStr | None = None
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=2000)
    dietary_preferences: str | None = Field(None, max_length=500)
    allergies: str | None = Field(None, max_length=500)


class UserResponse(BaseModel):
    """Full profile returned to the account owner."""

    id: str
    email: str
    first_name: str | None
    last_name: str | None
    bio: str | None
    dietary_preferences: str | None
    allergies: str | None
    roles: list[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PublicUserResponse(BaseModel):
    """Profile subset visible to anyone."""

    id: str
    first_name: str | None
    last_name: str | None
    bio: str | None

    model_config = ConfigDict(from_attributes=True)
