"""Leaderboard: profiles ranked by total points."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.core.config import get_settings
from fitquest.core.constants import LEADERBOARD_MAX_LIMIT
from fitquest.db.session import get_db
from fitquest.models import Profile, User, Workout
from fitquest.schemas.analytics import LeaderboardEntry, LeaderboardPosition
from fitquest.services.metrics import positional_ranks
from fitquest.services.policies import can_read

router = APIRouter()

# Points first; equal points go to the older account, then the lower account id
LEADERBOARD_ORDER = (Profile.total_points.desc(), Profile.created_at.asc(), Profile.user_id.asc())


@router.get("", response_model=list[LeaderboardEntry])
async def leaderboard(
    limit: int | None = Query(None, ge=1, le=LEADERBOARD_MAX_LIMIT),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Top profiles with positional rank (ties get distinct, deterministic positions)."""
    limit = limit or get_settings().leaderboard_default_limit
    workout_counts = (
        select(Workout.user_id, func.count(Workout.id).label("n"))
        .group_by(Workout.user_id)
        .subquery()
    )
    result = await db.execute(
        select(Profile, func.coalesce(workout_counts.c.n, 0))
        .outerjoin(workout_counts, workout_counts.c.user_id == Profile.user_id)
        .where(can_read(Profile, user.id))
        .order_by(*LEADERBOARD_ORDER)
        .limit(limit)
    )
    return [
        LeaderboardEntry(
            rank=rank,
            user_id=profile.user_id,
            username=profile.username,
            rank_title=profile.rank_title,
            total_points=profile.total_points,
            fitness_level=profile.fitness_level,
            total_workouts=n,
        )
        for rank, (profile, n) in positional_ranks(result.all())
    ]


@router.get("/me", response_model=LeaderboardPosition)
async def my_position(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Caller's rank = 1 + number of profiles strictly ahead in leaderboard order."""
    result = await db.execute(select(Profile).where(Profile.user_id == user.id))
    me = result.scalar_one_or_none()
    if not me:
        raise HTTPException(status_code=404, detail="Profile not found")
    ahead = or_(
        Profile.total_points > me.total_points,
        and_(Profile.total_points == me.total_points, Profile.created_at < me.created_at),
        and_(
            Profile.total_points == me.total_points,
            Profile.created_at == me.created_at,
            Profile.user_id < me.user_id,
        ),
    )
    n_ahead = (await db.execute(select(func.count(Profile.id)).where(ahead))).scalar() or 0
    total = (await db.execute(select(func.count(Profile.id)))).scalar() or 0
    return LeaderboardPosition(rank=n_ahead + 1, total_profiles=total, total_points=me.total_points)
