"""Account registration, profile bootstrap and credential checks."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.core.constants import DEFAULT_USERNAME_PREFIX
from fitquest.core.security import hash_password, verify_password
from fitquest.models import Profile, User

logger = logging.getLogger(__name__)


def default_username(user_id: uuid.UUID) -> str:
    """user_<first 8 characters of the account id>."""
    return f"{DEFAULT_USERNAME_PREFIX}{str(user_id)[:8]}"


async def register_account(
    db: AsyncSession,
    email: str,
    password: str,
    username: str | None = None,
    full_name: str | None = None,
) -> User:
    """Create the account and its profile in the caller's transaction.

    Duplicate email or username surfaces as IntegrityError on flush.
    """
    user = User(id=uuid.uuid4(), email=email, hashed_password=hash_password(password))
    db.add(user)
    await db.flush()
    profile = Profile(
        user_id=user.id,
        username=username or default_username(user.id),
        full_name=full_name or "",
    )
    db.add(profile)
    await db.flush()
    logger.info("Registered account %s with profile %s", user.id, profile.username)
    return user


async def authenticate(db: AsyncSession, email: str, password: str) -> User | None:
    """Return the account when the credentials match, else None."""
    result = await db.execute(select(User).where(User.email == email.strip().lower()))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(password, user.hashed_password):
        return None
    return user
