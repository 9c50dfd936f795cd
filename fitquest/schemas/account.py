"""Account signup and read schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitquest.schemas.validators import validate_email, validate_username


class SignupRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    username: str | None = None
    full_name: str | None = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return validate_email(v)

    @field_validator("username")
    @classmethod
    def _username(cls, v: str | None) -> str | None:
        return validate_username(v) if v is not None else None


class AccountRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    created_at: datetime
