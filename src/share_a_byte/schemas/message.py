"""Direct message-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    """Schema for sending a direct message."""

    recipient_id: str = Field(..., description="Identifier of the receiving user")
    content: str = Field(..., min_length=1, max_length=5000)
    post_id: str | None = Field(None, description="Listing the conversation is about")


class MessageResponse(BaseModel):
    """Schema for direct message information returned by the API."""

    id: str
    sender_id: str
    recipient_id: str
    post_id: str | None
    content: str
    read: bool
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
