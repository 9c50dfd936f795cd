"""Dashboard aggregates: counts, averages, streaks and level progress."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.core.config import get_settings
from fitquest.db.session import get_db
from fitquest.models import Profile, User
from fitquest.schemas.analytics import AnalyticsSummary, StreakRead
from fitquest.services import activity
from fitquest.services.metrics import average_duration, level_progress, start_of_week

router = APIRouter()


@router.get("/summary", response_model=AnalyticsSummary)
async def summary(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Everything the dashboard shows, computed from the caller's rows."""
    tz = get_settings().timezone
    week_start = start_of_week(datetime.now(timezone.utc), tz)
    streak = await activity.streaks(db, user.id, tz)
    points = (await db.execute(select(Profile.total_points).where(Profile.user_id == user.id))).scalar() or 0
    return AnalyticsSummary(
        total_workouts=await activity.count_workouts(db, user.id),
        workouts_this_week=await activity.count_workouts(db, user.id, since=week_start),
        total_exercises=await activity.count_workout_exercises(db, user.id),
        average_workout_minutes=average_duration(await activity.workout_durations(db, user.id)),
        personal_bests=await activity.count_personal_bests(db, user.id),
        current_streak=streak["current_streak"],
        longest_streak=streak["longest_streak"],
        level=level_progress(points),
    )


@router.get("/streak", response_model=StreakRead)
async def get_streak(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Current workout streak (consecutive days with at least 1 workout, ending
    today or yesterday), longest streak, and the day of the last workout.
    """
    return await activity.streaks(db, user.id, get_settings().timezone)
