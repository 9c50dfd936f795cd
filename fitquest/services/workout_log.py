"""Logging a workout: the workout row, its exercises, personal bests, then achievements."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.models import Achievement, Workout, WorkoutExercise
from fitquest.services.achievements import evaluate_achievements
from fitquest.services.personal_bests import record_personal_best


@dataclass
class LoggedWorkout:
    workout: Workout
    personal_bests: list[dict[str, Any]] = field(default_factory=list)
    new_achievements: list[Achievement] = field(default_factory=list)


async def log_workout(
    db: AsyncSession,
    user_id: uuid.UUID,
    name: str,
    exercises: list[dict[str, Any]],
    notes: str | None = None,
    duration_minutes: int | None = None,
    tz: str = "UTC",
) -> LoggedWorkout:
    """Create a workout and its exercises for `user_id`.

    The workout is flushed first because every exercise row needs its id.
    """
    workout = Workout(user_id=user_id, name=name, notes=notes, duration_minutes=duration_minutes)
    db.add(workout)
    await db.flush()

    logged = LoggedWorkout(workout=workout)
    for data in exercises:
        we = WorkoutExercise(workout_id=workout.id, **data)
        db.add(we)
        await db.flush()
        improved = await record_personal_best(db, user_id, we)
        if improved:
            logged.personal_bests.append({"exercise_id": we.exercise_id, "metrics": improved})

    logged.new_achievements = await evaluate_achievements(db, user_id, tz)
    return logged
