"""The caller's own personal bests."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitquest.api.deps import get_current_user
from fitquest.db.session import get_db
from fitquest.models import PersonalBest, User
from fitquest.schemas.personal_best import PersonalBestRead
from fitquest.services.policies import writable

router = APIRouter()


@router.get("", response_model=list[PersonalBestRead])
async def list_my_personal_bests(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Most recently improved first."""
    result = await db.execute(
        writable(PersonalBest, user.id)
        .options(selectinload(PersonalBest.exercise))
        .order_by(PersonalBest.achieved_at.desc())
    )
    return list(result.scalars().all())
