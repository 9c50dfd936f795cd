"""Follow, share and like schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FollowRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    follower_id: UUID
    following_id: UUID
    created_at: datetime


class WorkoutShareCreate(BaseModel):
    workout_id: UUID
    caption: str | None = Field(None, max_length=300)


class WorkoutShareRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workout_id: UUID
    user_id: UUID
    caption: str | None = None
    likes_count: int
    created_at: datetime


class FeedItem(WorkoutShareRead):
    """A share enriched with its author and the workout it publishes."""

    username: str
    profile_picture_url: str | None = None
    workout_name: str
    workout_duration_minutes: int | None = None
    liked_by_me: bool = False


class LikeState(BaseModel):
    share_id: UUID
    liked: bool
    likes_count: int
