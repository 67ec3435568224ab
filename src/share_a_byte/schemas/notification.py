"""Notification schemas, including the per-type metadata snapshots."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel


class _SnapshotModel(BaseModel):
    """Metadata snapshots are frozen and serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PostCompletedMetadata(_SnapshotModel):
    """Copy of a post's descriptive fields taken when it was archived."""

    type: Literal["post_completed"] = "post_completed"
    post_title: str | None = None
    post_description: str | None = None
    post_category: str | None = None
    location: str | None = None
    go_bad_date: str | None = Field(None, description="ISO-8601 expiry timestamp")
    food_allergens: str | None = None


class MessageReceivedMetadata(_SnapshotModel):
    """Pointer to the message that triggered the alert."""

    type: Literal["message_received"] = "message_received"
    message_id: str
    preview: str | None = None


class SystemMetadata(_SnapshotModel):
    """Free-form context for operator-issued notices."""

    type: Literal["system"] = "system"
    detail: str | None = None


NotificationMetadata = Annotated[
    PostCompletedMetadata | MessageReceivedMetadata | SystemMetadata,
    Field(discriminator="type"),
]

_metadata_adapter: TypeAdapter[Any] = TypeAdapter(NotificationMetadata)


def parse_metadata(notification_type: str, payload: dict[str, Any] | None) -> Any:
    """Return the typed snapshot stored on a notification row, or None."""
    if payload is None:
        return None
    return _metadata_adapter.validate_python({"type": notification_type, **payload})


def dump_metadata(snapshot: BaseModel) -> dict[str, Any]:
    """Serialize a snapshot for storage, keeping null fields explicit."""
    return snapshot.model_dump(mode="json", by_alias=True, exclude_none=False)


class NotificationResponse(BaseModel):
    """Schema for notification information returned by the API."""

    id: str
    content: str
    type: str
    is_read: bool
    recipient_id: str
    sender_id: str | None
    related_post_id: str | None
    metadata: NotificationMetadata | None = None
    created_at: datetime

    @model_validator(mode="before")
    @classmethod
    def _load_metadata(cls, data: object) -> object:
        if isinstance(data, dict):
            return data
        extracted: dict[str, object | None] = {}
        for field_name in cls.model_fields:
            if field_name == "metadata":
                continue
            extracted[field_name] = getattr(data, field_name, None)
        extracted["metadata"] = parse_metadata(
            getattr(data, "type", ""),
            getattr(data, "metadata_", None),
        )
        return extracted

    model_config = ConfigDict(from_attributes=True)


class VoteRequest(BaseModel):
    """Parameters of the voteOnNotification action."""

    notification_id: str = Field(..., min_length=1)
    vote_type: Literal["upvote", "downvote"]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VoteResult(BaseModel):
    """Outcome of a vote; failures are reported, never raised."""

    success: bool
    message: str
    score_change: int | None = Field(None, description="+1 for upvote, -1 for downvote")
    points: int | None = Field(None, description="Signed point delta applied to the sender")
    new_score: int | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
