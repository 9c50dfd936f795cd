"""Achievement evaluation: grant every definition whose threshold the user has reached."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.core.enums import RequirementType
from fitquest.models import Achievement, Profile, UserAchievement
from fitquest.services import activity

logger = logging.getLogger(__name__)


async def user_aggregates(db: AsyncSession, user_id: uuid.UUID, tz: str = "UTC") -> dict[RequirementType, float]:
    """Current value of every aggregate an achievement can be defined over."""
    # A streak earned long ago still counts toward its achievement
    streak = await activity.streaks(db, user_id, tz, lookback_days=None)
    return {
        RequirementType.WORKOUTS_COUNT: await activity.count_workouts(db, user_id),
        RequirementType.STREAK_DAYS: streak["longest_streak"],
        RequirementType.TOTAL_WEIGHT: await activity.lifted_volume(db, user_id),
        RequirementType.PERSONAL_BESTS: await activity.count_personal_bests(db, user_id),
    }


async def evaluate_achievements(
    db: AsyncSession,
    user_id: uuid.UUID,
    tz: str = "UTC",
) -> list[Achievement]:
    """Grant newly reached achievements and credit their points to the profile.

    Safe to call repeatedly: an achievement already earned is skipped, and the
    (user_id, achievement_id) unique constraint rejects any duplicate grant.
    """
    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    profile = result.scalar_one_or_none()
    if profile is None:
        return []

    earned = set(
        (await db.execute(select(UserAchievement.achievement_id).where(UserAchievement.user_id == user_id)))
        .scalars()
        .all()
    )
    definitions = (
        await db.execute(select(Achievement).order_by(Achievement.requirement_value, Achievement.name))
    ).scalars().all()
    pending = [a for a in definitions if a.id not in earned]
    if not pending:
        return []

    aggregates = await user_aggregates(db, user_id, tz)
    granted: list[Achievement] = []
    for achievement in pending:
        try:
            requirement = RequirementType(achievement.requirement_type)
        except ValueError:
            logger.warning(
                "Skipping achievement %r: unknown requirement type %r",
                achievement.name,
                achievement.requirement_type,
            )
            continue
        if aggregates[requirement] < achievement.requirement_value:
            continue
        db.add(UserAchievement(user_id=user_id, achievement_id=achievement.id))
        profile.award_points(achievement.points_reward)
        granted.append(achievement)
        logger.info(
            "Granted achievement %r (+%d points) to user %s",
            achievement.name,
            achievement.points_reward,
            user_id,
        )

    if granted:
        await db.flush()
    return granted
