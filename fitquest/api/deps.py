"""Request dependencies: authenticated account."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.db.session import get_db
from fitquest.models import User
from fitquest.services.accounts import authenticate

basic_auth = HTTPBasic(description="Account email and password")


async def get_current_user(
    credentials: HTTPBasicCredentials = Depends(basic_auth),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the requesting account; unknown email and wrong password look the same."""
    user = await authenticate(db, credentials.username, credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user
