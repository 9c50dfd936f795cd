"""Workout templates - save, share and reload workout plans."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitquest.api.deps import get_current_user
from fitquest.api.v1.endpoints.exercises import ensure_exercises_exist
from fitquest.api.v1.endpoints.workouts import load_workout
from fitquest.core.config import get_settings
from fitquest.core.constants import MAX_EXERCISES_PER_WORKOUT
from fitquest.core.enums import TemplateVisibility
from fitquest.db.session import get_db
from fitquest.models import TemplateExercise, User, WorkoutTemplate
from fitquest.schemas.achievement import AchievementRead
from fitquest.schemas.template import (
    TemplateExerciseCreate,
    WorkoutTemplateCreate,
    WorkoutTemplateCreateFromWorkout,
    WorkoutTemplateRead,
    WorkoutTemplateUpdate,
)
from fitquest.schemas.workout import PersonalBestImprovement, WorkoutCreated, WorkoutReadWithExercises
from fitquest.services.policies import readable, writable
from fitquest.services.workout_log import log_workout

router = APIRouter()


def _with_exercises(stmt):
    return stmt.options(
        selectinload(WorkoutTemplate.exercises).selectinload(TemplateExercise.exercise)
    ).execution_options(populate_existing=True)


async def _load_template(db: AsyncSession, template_id: uuid.UUID, user_id: uuid.UUID) -> WorkoutTemplate:
    result = await db.execute(
        _with_exercises(readable(WorkoutTemplate, user_id).where(WorkoutTemplate.id == template_id))
    )
    t = result.scalar_one_or_none()
    if not t:
        raise HTTPException(status_code=404, detail="Template not found")
    return t


def _add_steps(db: AsyncSession, template_id: uuid.UUID, steps: list[TemplateExerciseCreate]) -> None:
    for i, step in enumerate(steps):
        data = step.model_dump()
        if data["order_index"] is None:
            data["order_index"] = i
        db.add(TemplateExercise(template_id=template_id, **data))


@router.get("", response_model=list[WorkoutTemplateRead])
async def list_templates(
    visibility: TemplateVisibility = TemplateVisibility.ALL,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """Templates the caller can see, most used first.

    visibility=all: public + own; mine: own only; public: public only.
    """
    stmt = readable(WorkoutTemplate, user.id)
    if visibility == TemplateVisibility.MINE:
        stmt = stmt.where(WorkoutTemplate.creator_id == user.id)
    elif visibility == TemplateVisibility.PUBLIC:
        stmt = stmt.where(WorkoutTemplate.is_public.is_(True))
    result = await db.execute(
        _with_exercises(stmt)
        .order_by(WorkoutTemplate.times_used.desc(), WorkoutTemplate.created_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


@router.post("", response_model=WorkoutTemplateRead, status_code=201)
async def create_template(
    payload: WorkoutTemplateCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a template with its ordered exercises."""
    await ensure_exercises_exist(db, (e.exercise_id for e in payload.exercises))
    data = payload.model_dump(exclude={"exercises"})
    data["difficulty_level"] = payload.difficulty_level.value
    t = WorkoutTemplate(creator_id=user.id, **data)
    db.add(t)
    await db.flush()
    _add_steps(db, t.id, payload.exercises)
    await db.flush()
    return await _load_template(db, t.id, user.id)


@router.post("/from-workout", response_model=WorkoutTemplateRead, status_code=201)
async def create_template_from_workout(
    payload: WorkoutTemplateCreateFromWorkout,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Save one of the caller's workouts as a template (exercise order and targets preserved)."""
    workout = await load_workout(db, payload.workout_id, user.id)
    t = WorkoutTemplate(
        creator_id=user.id,
        name=payload.name,
        difficulty_level=payload.difficulty_level.value,
        is_public=payload.is_public,
    )
    db.add(t)
    await db.flush()
    for i, we in enumerate(workout.exercises[:MAX_EXERCISES_PER_WORKOUT]):
        db.add(
            TemplateExercise(
                template_id=t.id,
                exercise_id=we.exercise_id,
                sets=we.sets,
                reps=list(we.reps) if we.reps is not None else None,
                weight=list(we.weight) if we.weight is not None else None,
                notes=we.notes,
                order_index=i,
            )
        )
    await db.flush()
    return await _load_template(db, t.id, user.id)


@router.get("/{template_id}", response_model=WorkoutTemplateRead)
async def get_template(
    template_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a template with its exercises (public or own)."""
    return await _load_template(db, template_id, user.id)


@router.patch("/{template_id}", response_model=WorkoutTemplateRead)
async def update_template(
    template_id: uuid.UUID,
    payload: WorkoutTemplateUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update template fields; a given exercise list replaces the existing steps."""
    result = await db.execute(
        _with_exercises(writable(WorkoutTemplate, user.id).where(WorkoutTemplate.id == template_id))
    )
    t = result.scalar_one_or_none()
    if not t:
        raise HTTPException(status_code=404, detail="Template not found")
    data = payload.model_dump(exclude_unset=True, exclude={"exercises"})
    if data.get("difficulty_level") is not None:
        data["difficulty_level"] = data["difficulty_level"].value
    for k, v in data.items():
        setattr(t, k, v)
    if payload.exercises is not None:
        await ensure_exercises_exist(db, (e.exercise_id for e in payload.exercises))
        t.exercises.clear()
        await db.flush()
        _add_steps(db, t.id, payload.exercises)
    await db.flush()
    return await _load_template(db, template_id, user.id)


@router.delete("/{template_id}", status_code=204)
async def delete_template(
    template_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a template (creator only)."""
    result = await db.execute(writable(WorkoutTemplate, user.id).where(WorkoutTemplate.id == template_id))
    t = result.scalar_one_or_none()
    if not t:
        raise HTTPException(status_code=404, detail="Template not found")
    await db.delete(t)
    return None


@router.post("/{template_id}/instantiate", response_model=WorkoutCreated, status_code=201)
async def instantiate_template(
    template_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Log a workout for the caller from a template (same exercises, sets, reps, weights)."""
    t = await _load_template(db, template_id, user.id)
    logged = await log_workout(
        db,
        user.id,
        name=t.name,
        notes=f"From template: {t.name}",
        exercises=[
            {
                "exercise_id": te.exercise_id,
                "sets": te.sets,
                "reps": list(te.reps) if te.reps is not None else None,
                "weight": list(te.weight) if te.weight is not None else None,
                "notes": te.notes,
            }
            for te in t.exercises
        ],
        tz=get_settings().timezone,
    )
    await db.execute(
        update(WorkoutTemplate)
        .where(WorkoutTemplate.id == template_id)
        .values(times_used=WorkoutTemplate.times_used + 1)
        .execution_options(synchronize_session=False)
    )
    workout = await load_workout(db, logged.workout.id, user.id)
    return WorkoutCreated(
        **WorkoutReadWithExercises.model_validate(workout).model_dump(),
        personal_bests=[PersonalBestImprovement(**pb) for pb in logged.personal_bests],
        new_achievements=[AchievementRead.model_validate(a) for a in logged.new_achievements],
    )
