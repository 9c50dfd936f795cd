"""Per-user activity queries feeding the dashboard, leaderboard and achievements."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.core.constants import STREAK_LOOKBACK_DAYS
from fitquest.models import PersonalBest, Workout, WorkoutExercise
from fitquest.services.metrics import compute_streaks, local_date, total_volume


def as_utc(moment: datetime) -> datetime:
    """Aware UTC copy of `moment`; naive values are taken as UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


async def count_workouts(
    db: AsyncSession,
    user_id: uuid.UUID,
    since: datetime | None = None,
    until: datetime | None = None,
) -> int:
    stmt = select(func.count(Workout.id)).where(Workout.user_id == user_id)
    if since is not None:
        stmt = stmt.where(Workout.created_at >= as_utc(since))
    if until is not None:
        stmt = stmt.where(Workout.created_at <= as_utc(until))
    return int((await db.execute(stmt)).scalar() or 0)


async def count_workout_exercises(db: AsyncSession, user_id: uuid.UUID) -> int:
    result = await db.execute(
        select(func.count(WorkoutExercise.id))
        .join(Workout, Workout.id == WorkoutExercise.workout_id)
        .where(Workout.user_id == user_id)
    )
    return int(result.scalar() or 0)


async def count_personal_bests(db: AsyncSession, user_id: uuid.UUID) -> int:
    result = await db.execute(select(func.count(PersonalBest.id)).where(PersonalBest.user_id == user_id))
    return int(result.scalar() or 0)


async def workout_durations(db: AsyncSession, user_id: uuid.UUID) -> list[int]:
    result = await db.execute(
        select(Workout.duration_minutes).where(
            Workout.user_id == user_id, Workout.duration_minutes.isnot(None)
        )
    )
    return [row[0] for row in result.all()]


async def workout_dates(
    db: AsyncSession,
    user_id: uuid.UUID,
    tz: str = "UTC",
    lookback_days: int | None = STREAK_LOOKBACK_DAYS,
) -> list[date]:
    """Distinct local calendar days with at least one workout, newest first.

    `lookback_days=None` reads the whole history.
    """
    stmt = select(Workout.created_at).where(Workout.user_id == user_id)
    if lookback_days is not None:
        cutoff = datetime.now(timezone.utc) - timedelta(days=lookback_days)
        stmt = stmt.where(Workout.created_at >= cutoff)
    result = await db.execute(stmt)
    return sorted({local_date(row[0], tz) for row in result.all()}, reverse=True)


async def streaks(
    db: AsyncSession,
    user_id: uuid.UUID,
    tz: str = "UTC",
    today: date | None = None,
    lookback_days: int | None = STREAK_LOOKBACK_DAYS,
) -> dict:
    """Current/longest streak of consecutive workout days plus the last workout day."""
    days = await workout_dates(db, user_id, tz, lookback_days)
    if today is None:
        today = local_date(datetime.now(timezone.utc), tz)
    current, longest = compute_streaks(days, today)
    return {
        "current_streak": current,
        "longest_streak": longest,
        "last_workout_date": days[0] if days else None,
    }


async def lifted_volume(db: AsyncSession, user_id: uuid.UUID) -> float:
    result = await db.execute(
        select(WorkoutExercise.reps, WorkoutExercise.weight)
        .join(Workout, Workout.id == WorkoutExercise.workout_id)
        .where(Workout.user_id == user_id)
    )
    return total_volume(result.all())
