import asyncio
import sys
import os

# Add project root to path
sys.path.append(os.getcwd())

from sqlalchemy import text

from fitquest.db.session import engine
from fitquest.db.base import Base
# Register every model on Base.metadata
import fitquest.models  # noqa: F401


async def drop_tables():
    print(f"Dropping all FitQuest tables ({len(Base.metadata.tables)} mapped)...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(drop_tables())
