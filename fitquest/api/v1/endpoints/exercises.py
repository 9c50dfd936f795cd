"""Exercise catalogue (read-only reference data)."""

import uuid
from collections.abc import Iterable

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.core.enums import ExerciseCategory
from fitquest.db.session import get_db
from fitquest.models import Exercise, User
from fitquest.schemas.exercise import ExerciseRead
from fitquest.services.policies import readable

router = APIRouter()


async def ensure_exercises_exist(db: AsyncSession, exercise_ids: Iterable[uuid.UUID]) -> None:
    """404 when any referenced exercise is missing from the catalogue."""
    wanted = set(exercise_ids)
    if not wanted:
        return
    result = await db.execute(select(Exercise.id).where(Exercise.id.in_(wanted)))
    if wanted - set(result.scalars().all()):
        raise HTTPException(status_code=404, detail="Exercise not found")


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    category: ExerciseCategory | None = None,
    skip: int = 0,
    limit: int = 100,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List exercises ordered by name, optionally by category."""
    stmt = readable(Exercise, user.id)
    if category is not None:
        stmt = stmt.where(Exercise.category == category.value)
    result = await db.execute(stmt.order_by(Exercise.name).offset(skip).limit(limit))
    return list(result.scalars().all())


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(readable(Exercise, user.id).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise
