"""Exercise schemas (read-only reference data)."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in other responses (id + name only)."""

    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class ExerciseRead(ExerciseRef):
    category: str
    muscle_groups: list[str] | None = None
    equipment: str | None = None
    video_url: str | None = None
    instructions: str | None = None
