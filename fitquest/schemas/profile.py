"""Profile schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitquest.schemas.validators import validate_username


class ProfileUpdate(BaseModel):
    username: str | None = None
    full_name: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=13, le=120, description="Age in years")
    weight: float | None = Field(None, ge=20, le=500, description="Body weight in kg")
    fitness_goals: str | None = Field(None, max_length=500)
    profile_picture_url: str | None = Field(None, max_length=2048)

    @field_validator("username")
    @classmethod
    def _username(cls, v: str | None) -> str:
        return validate_username(v)

    @field_validator("full_name")
    @classmethod
    def _strip(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    username: str
    full_name: str | None = None
    age: int | None = None
    weight: float | None = None
    fitness_goals: str | None = None
    profile_picture_url: str | None = None
    fitness_level: int
    total_points: int
    rank_title: str
    created_at: datetime
    updated_at: datetime


class LevelProgress(BaseModel):
    level: int
    rank_title: str
    total_points: int
    points_in_level: int
    points_to_next_level: int
    percent: float
