"""Achievement definitions, the caller's grants, and on-demand evaluation."""

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitquest.api.deps import get_current_user
from fitquest.core.config import get_settings
from fitquest.db.session import get_db
from fitquest.models import Achievement, Profile, User, UserAchievement
from fitquest.schemas.achievement import AchievementRead, EvaluationResult, UserAchievementRead
from fitquest.services.achievements import evaluate_achievements
from fitquest.services.policies import readable

router = APIRouter()


@router.get("", response_model=list[AchievementRead])
async def list_achievements(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        readable(Achievement, user.id).order_by(Achievement.requirement_type, Achievement.requirement_value)
    )
    return list(result.scalars().all())


@router.get("/mine", response_model=list[UserAchievementRead])
async def list_my_achievements(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Earned achievements, newest first."""
    result = await db.execute(
        readable(UserAchievement, user.id)
        .options(selectinload(UserAchievement.achievement))
        .order_by(UserAchievement.earned_at.desc())
    )
    return list(result.scalars().all())


@router.post("/evaluate", response_model=EvaluationResult)
async def evaluate_my_achievements(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Grant anything newly reached. Calling it again grants nothing twice."""
    granted = await evaluate_achievements(db, user.id, get_settings().timezone)
    total = (await db.execute(select(Profile.total_points).where(Profile.user_id == user.id))).scalar()
    return EvaluationResult(
        granted=[AchievementRead.model_validate(a) for a in granted],
        points_awarded=sum(a.points_reward for a in granted),
        total_points=total or 0,
    )
