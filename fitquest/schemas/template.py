"""Workout template schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fitquest.core.constants import MAX_EXERCISES_PER_WORKOUT
from fitquest.core.enums import DifficultyLevel
from fitquest.schemas.exercise import ExerciseRef
from fitquest.schemas.validators import not_null, required_name, validate_set_arrays


class TemplateExerciseBase(BaseModel):
    exercise_id: UUID
    sets: int | None = None
    reps: list[int] | None = None
    weight: list[float] | None = None
    notes: str | None = Field(None, max_length=500)
    order_index: int | None = Field(None, ge=0, description="Defaults to position in the list")


class TemplateExerciseCreate(TemplateExerciseBase):
    @model_validator(mode="after")
    def _arrays_match_sets(self):
        validate_set_arrays(self.sets, self.reps, self.weight)
        return self


class TemplateExerciseRead(TemplateExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    template_id: UUID
    order_index: int
    exercise: ExerciseRef | None = None


class WorkoutTemplateBase(BaseModel):
    name: str
    description: str | None = Field(None, max_length=500)
    difficulty_level: DifficultyLevel
    category: str | None = Field(None, max_length=50)
    is_public: bool = False

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return required_name(v, "Template")


class WorkoutTemplateCreate(WorkoutTemplateBase):
    exercises: list[TemplateExerciseCreate] = Field(default_factory=list, max_length=MAX_EXERCISES_PER_WORKOUT)


class WorkoutTemplateUpdate(BaseModel):
    name: str | None = None
    description: str | None = Field(None, max_length=500)
    difficulty_level: DifficultyLevel | None = None
    category: str | None = Field(None, max_length=50)
    is_public: bool | None = None
    exercises: list[TemplateExerciseCreate] | None = Field(
        None, max_length=MAX_EXERCISES_PER_WORKOUT, description="Replaces the steps when given"
    )

    @field_validator("name")
    @classmethod
    def _name(cls, v: str | None) -> str:
        return required_name(v, "Template")

    @field_validator("is_public")
    @classmethod
    def _is_public(cls, v: bool | None) -> bool:
        return not_null(v, "is_public")


class WorkoutTemplateRead(WorkoutTemplateBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    creator_id: UUID
    difficulty_level: DifficultyLevel | None = None
    times_used: int
    created_at: datetime
    updated_at: datetime
    exercises: list[TemplateExerciseRead] = []


class WorkoutTemplateCreateFromWorkout(BaseModel):
    """Create a template from an existing workout (workout_id + name)."""

    name: str
    workout_id: UUID
    difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER
    is_public: bool = False

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return required_name(v, "Template")
