"""Achievement schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AchievementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    points_reward: int
    icon: str | None = None
    requirement_type: str
    requirement_value: int


class UserAchievementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    achievement_id: UUID
    earned_at: datetime
    achievement: AchievementRead


class EvaluationResult(BaseModel):
    granted: list[AchievementRead]
    points_awarded: int
    total_points: int
