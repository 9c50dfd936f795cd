"""Likes on shared workouts.

The like row and the share's likes_count move together inside the caller's
transaction; the counter is changed with a single SQL expression so
concurrent likes on one share do not lose updates.
"""

from __future__ import annotations

import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.models import WorkoutLike, WorkoutShare


async def _likes_count(db: AsyncSession, share_id: uuid.UUID) -> int:
    result = await db.execute(select(WorkoutShare.likes_count).where(WorkoutShare.id == share_id))
    return int(result.scalar_one())


async def like_share(db: AsyncSession, share_id: uuid.UUID, user_id: uuid.UUID) -> int:
    """unliked -> liked. A second like violates (share_id, user_id) uniqueness on flush."""
    db.add(WorkoutLike(share_id=share_id, user_id=user_id))
    await db.flush()
    await db.execute(
        update(WorkoutShare)
        .where(WorkoutShare.id == share_id)
        .values(likes_count=WorkoutShare.likes_count + 1)
        .execution_options(synchronize_session=False)
    )
    return await _likes_count(db, share_id)


async def unlike_share(db: AsyncSession, share_id: uuid.UUID, user_id: uuid.UUID) -> int | None:
    """liked -> unliked. Returns None (and changes nothing) when there was no like."""
    result = await db.execute(
        delete(WorkoutLike)
        .where(WorkoutLike.share_id == share_id, WorkoutLike.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        return None
    await db.execute(
        update(WorkoutShare)
        .where(WorkoutShare.id == share_id, WorkoutShare.likes_count > 0)
        .values(likes_count=WorkoutShare.likes_count - 1)
        .execution_options(synchronize_session=False)
    )
    return await _likes_count(db, share_id)


async def liked_share_ids(db: AsyncSession, user_id: uuid.UUID) -> set[uuid.UUID]:
    result = await db.execute(select(WorkoutLike.share_id).where(WorkoutLike.user_id == user_id))
    return set(result.scalars().all())
