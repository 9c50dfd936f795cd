"""Workout CRUD endpoints (owner-only)."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitquest.api.deps import get_current_user
from fitquest.api.v1.endpoints.exercises import ensure_exercises_exist
from fitquest.core.config import get_settings
from fitquest.core.constants import MAX_EXERCISES_PER_WORKOUT
from fitquest.db.session import get_db
from fitquest.models import User, Workout, WorkoutExercise
from fitquest.schemas.achievement import AchievementRead
from fitquest.schemas.workout import (
    PersonalBestImprovement,
    WorkoutCreate,
    WorkoutCreated,
    WorkoutExerciseCreate,
    WorkoutExerciseRead,
    WorkoutExerciseUpdate,
    WorkoutRead,
    WorkoutReadWithExercises,
    WorkoutStats,
    WorkoutUpdate,
)
from fitquest.schemas.validators import validate_set_arrays
from fitquest.services import activity
from fitquest.services.metrics import start_of_week
from fitquest.services.personal_bests import record_personal_best
from fitquest.services.policies import readable, writable
from fitquest.services.workout_log import log_workout

router = APIRouter()


async def load_workout(db: AsyncSession, workout_id: uuid.UUID, user_id: uuid.UUID) -> Workout:
    """Workout with nested exercises, or 404 when missing or not the caller's."""
    result = await db.execute(
        readable(Workout, user_id)
        .where(Workout.id == workout_id)
        .options(selectinload(Workout.exercises).selectinload(WorkoutExercise.exercise))
        .execution_options(populate_existing=True)
    )
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


async def _load_workout_exercise(
    db: AsyncSession, workout_id: uuid.UUID, we_id: uuid.UUID, user_id: uuid.UUID
) -> WorkoutExercise:
    result = await db.execute(
        writable(WorkoutExercise, user_id)
        .where(WorkoutExercise.id == we_id, WorkoutExercise.workout_id == workout_id)
        .options(selectinload(WorkoutExercise.exercise))
        .execution_options(populate_existing=True)
    )
    we = result.scalar_one_or_none()
    if not we:
        raise HTTPException(status_code=404, detail="Workout exercise not found")
    return we


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """List the caller's workouts (without exercises), newest first, optionally by date range."""
    stmt = readable(Workout, user.id)
    if from_date:
        stmt = stmt.where(Workout.created_at >= activity.as_utc(from_date))
    if to_date:
        stmt = stmt.where(Workout.created_at <= activity.as_utc(to_date))
    stmt = stmt.order_by(Workout.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/stats", response_model=WorkoutStats)
async def workout_stats(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """Total workouts, workouts since local Sunday midnight, and an optional range count."""
    week_start = start_of_week(datetime.now(timezone.utc), get_settings().timezone)
    in_range = None
    if from_date or to_date:
        in_range = await activity.count_workouts(db, user.id, since=from_date, until=to_date)
    return WorkoutStats(
        total=await activity.count_workouts(db, user.id),
        this_week=await activity.count_workouts(db, user.id, since=week_start),
        week_start=week_start,
        in_range=in_range,
    )


@router.post("", response_model=WorkoutCreated, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Log a workout with its exercises. Reports improved personal bests and new achievements."""
    await ensure_exercises_exist(db, (e.exercise_id for e in payload.exercises))
    logged = await log_workout(
        db,
        user.id,
        name=payload.name,
        notes=payload.notes,
        duration_minutes=payload.duration_minutes,
        exercises=[e.model_dump() for e in payload.exercises],
        tz=get_settings().timezone,
    )
    workout = await load_workout(db, logged.workout.id, user.id)
    return WorkoutCreated(
        **WorkoutReadWithExercises.model_validate(workout).model_dump(),
        personal_bests=[PersonalBestImprovement(**pb) for pb in logged.personal_bests],
        new_achievements=[AchievementRead.model_validate(a) for a in logged.new_achievements],
    )


@router.get("/{workout_id}", response_model=WorkoutReadWithExercises)
async def get_workout(
    workout_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a workout with all exercises (and exercise info)."""
    return await load_workout(db, workout_id, user.id)


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update name, notes or duration."""
    result = await db.execute(writable(Workout, user.id).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(workout, k, v)
    await db.flush()
    await db.refresh(workout)
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its exercises. Personal bests and points already earned stay."""
    result = await db.execute(writable(Workout, user.id).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    await db.delete(workout)
    return None


@router.post("/{workout_id}/exercises", response_model=WorkoutExerciseRead, status_code=201)
async def add_exercise_to_workout(
    workout_id: uuid.UUID,
    payload: WorkoutExerciseCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add an exercise (max 20 per workout). Updates the personal best for that exercise."""
    result = await db.execute(writable(Workout, user.id).where(Workout.id == workout_id))
    if not result.scalar_one_or_none():
        raise HTTPException(status_code=404, detail="Workout not found")
    await ensure_exercises_exist(db, [payload.exercise_id])

    count = (
        await db.execute(select(func.count(WorkoutExercise.id)).where(WorkoutExercise.workout_id == workout_id))
    ).scalar() or 0
    if count >= MAX_EXERCISES_PER_WORKOUT:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {MAX_EXERCISES_PER_WORKOUT} exercises per workout.",
        )

    we = WorkoutExercise(workout_id=workout_id, **payload.model_dump())
    db.add(we)
    await db.flush()
    await record_personal_best(db, user.id, we)
    return await _load_workout_exercise(db, workout_id, we.id, user.id)


@router.patch("/{workout_id}/exercises/{workout_exercise_id}", response_model=WorkoutExerciseRead)
async def update_workout_exercise(
    workout_id: uuid.UUID,
    workout_exercise_id: uuid.UUID,
    payload: WorkoutExerciseUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Partial update; the merged sets/reps/weight must still line up."""
    we = await _load_workout_exercise(db, workout_id, workout_exercise_id, user.id)
    data = payload.model_dump(exclude_unset=True)
    try:
        validate_set_arrays(
            data.get("sets", we.sets),
            data.get("reps", we.reps),
            data.get("weight", we.weight),
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    for k, v in data.items():
        setattr(we, k, v)
    await db.flush()
    await record_personal_best(db, user.id, we)
    return await _load_workout_exercise(db, workout_id, workout_exercise_id, user.id)


@router.delete("/{workout_id}/exercises/{workout_exercise_id}", status_code=204)
async def delete_workout_exercise(
    workout_id: uuid.UUID,
    workout_exercise_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    we = await _load_workout_exercise(db, workout_id, workout_exercise_id, user.id)
    await db.delete(we)
    return None
