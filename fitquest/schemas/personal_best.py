"""Personal best schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from fitquest.schemas.exercise import ExerciseRef


class PersonalBestRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    exercise_id: UUID
    best_weight: float | None = None
    best_reps: int | None = None
    best_distance_km: float | None = None
    best_duration_seconds: int | None = None
    achieved_at: datetime
    exercise: ExerciseRef | None = None
