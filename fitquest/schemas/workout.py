"""Workout and WorkoutExercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fitquest.core.constants import MAX_EXERCISE_DURATION_SECONDS, MAX_EXERCISES_PER_WORKOUT
from fitquest.schemas.achievement import AchievementRead
from fitquest.schemas.exercise import ExerciseRef
from fitquest.schemas.validators import required_name, validate_set_arrays


class WorkoutExerciseBase(BaseModel):
    exercise_id: UUID
    sets: int | None = None
    reps: list[int] | None = None
    weight: list[float] | None = None
    duration_seconds: int | None = Field(None, ge=0, le=MAX_EXERCISE_DURATION_SECONDS)
    distance_km: float | None = Field(None, ge=0, lt=1000)
    notes: str | None = Field(None, max_length=500)


class WorkoutExerciseCreate(WorkoutExerciseBase):
    @model_validator(mode="after")
    def _arrays_match_sets(self):
        validate_set_arrays(self.sets, self.reps, self.weight)
        return self


class WorkoutExerciseUpdate(BaseModel):
    """Partial update; the merged row is re-checked against the set arrays rule."""

    sets: int | None = None
    reps: list[int] | None = None
    weight: list[float] | None = None
    duration_seconds: int | None = Field(None, ge=0, le=MAX_EXERCISE_DURATION_SECONDS)
    distance_km: float | None = Field(None, ge=0, lt=1000)
    notes: str | None = Field(None, max_length=500)


class WorkoutExerciseRead(WorkoutExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID
    created_at: datetime
    exercise: ExerciseRef | None = None


class WorkoutBase(BaseModel):
    name: str
    notes: str | None = Field(None, max_length=500)
    duration_minutes: int | None = Field(None, ge=1, le=600)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return required_name(v, "Workout")


class WorkoutCreate(WorkoutBase):
    exercises: list[WorkoutExerciseCreate] = Field(default_factory=list, max_length=MAX_EXERCISES_PER_WORKOUT)


class WorkoutUpdate(BaseModel):
    name: str | None = None
    notes: str | None = Field(None, max_length=500)
    duration_minutes: int | None = Field(None, ge=1, le=600)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str | None) -> str:
        return required_name(v, "Workout")


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime


class WorkoutReadWithExercises(WorkoutRead):
    """Workout with nested exercises (for detail view)."""

    exercises: list[WorkoutExerciseRead] = []


class PersonalBestImprovement(BaseModel):
    exercise_id: UUID
    metrics: list[str]


class WorkoutCreated(WorkoutReadWithExercises):
    """Creation response: also reports what the workout unlocked."""

    personal_bests: list[PersonalBestImprovement] = []
    new_achievements: list[AchievementRead] = []


class WorkoutStats(BaseModel):
    total: int
    this_week: int
    week_start: datetime
    in_range: int | None = None
