"""Account endpoints: signup, current account, account deletion."""

from fastapi import APIRouter, Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.db.session import get_db
from fitquest.models import User
from fitquest.schemas.account import AccountRead, SignupRequest
from fitquest.services.accounts import register_account

router = APIRouter()


@router.post("/signup", response_model=AccountRead, status_code=201)
async def signup(payload: SignupRequest, db: AsyncSession = Depends(get_db)):
    """Create an account; its profile is created alongside (default username user_<id prefix>)."""
    return await register_account(
        db,
        email=payload.email,
        password=payload.password,
        username=payload.username,
        full_name=payload.full_name,
    )


@router.get("/me", response_model=AccountRead)
async def read_account(user: User = Depends(get_current_user)):
    return user


@router.delete("/me", status_code=204)
async def delete_account(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete the account. Every row it owns goes with it (ON DELETE CASCADE)."""
    await db.execute(delete(User).where(User.id == user.id))
    return None
