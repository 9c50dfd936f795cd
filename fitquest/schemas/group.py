"""Coach group schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitquest.schemas.validators import not_null, required_name


class CoachGroupCreate(BaseModel):
    name: str
    description: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return required_name(v, "Group")


class CoachGroupUpdate(BaseModel):
    name: str | None = None
    description: str | None = Field(None, max_length=500)
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str | None) -> str:
        return required_name(v, "Group")

    @field_validator("is_active")
    @classmethod
    def _is_active(cls, v: bool | None) -> bool:
        return not_null(v, "is_active")


class CoachGroupRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    coach_id: UUID
    name: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class GroupMemberCreate(BaseModel):
    user_id: UUID


class GroupMemberRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    group_id: UUID
    user_id: UUID
    joined_at: datetime
