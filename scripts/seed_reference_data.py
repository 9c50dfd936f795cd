import asyncio
import os
import sys

# Add parent directory to path so we can import fitquest modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from fitquest.core.seed_data import ACHIEVEMENTS, EXERCISES
from fitquest.db.session import async_session_maker, engine
from fitquest.models import Achievement, Exercise


async def seed(session) -> tuple[int, int]:
    """Insert catalogue exercises and achievement definitions that are missing (matched by name)."""
    existing = set((await session.execute(select(Exercise.name))).scalars().all())
    new_exercises = [Exercise(**row) for row in EXERCISES if row["name"] not in existing]
    session.add_all(new_exercises)

    existing = set((await session.execute(select(Achievement.name))).scalars().all())
    new_achievements = [Achievement(**row) for row in ACHIEVEMENTS if row["name"] not in existing]
    session.add_all(new_achievements)

    await session.flush()
    return len(new_exercises), len(new_achievements)


async def main():
    print("Seeding reference data...")
    async with async_session_maker() as session:
        exercises, achievements = await seed(session)
        await session.commit()
    print(f"Added {exercises} exercises and {achievements} achievements.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
