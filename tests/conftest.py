"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; point the app at SQLite before importing it
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite://")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("TIMEZONE", "UTC")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fitquest.core.seed_data import ACHIEVEMENTS, EXERCISES
from fitquest.db.base import Base
from fitquest.db.session import get_db
from fitquest.main import app
from fitquest.models import Achievement, Exercise

PASSWORD = "correct-horse-42"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test, schema created and reference data seeded."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    maker = async_sessionmaker(engine, expire_on_commit=False)
    async with maker() as session:
        session.add_all([Exercise(**row) for row in EXERCISES])
        session.add_all([Achievement(**row) for row in ACHIEVEMENTS])
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def client(session_maker):
    async def _get_test_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def signup(client, email, username=None):
    """Create an account and return {"id", "email", "auth"} for it."""
    body = {"email": email, "password": PASSWORD}
    if username:
        body["username"] = username
    r = await client.post("/api/v1/auth/signup", json=body)
    assert r.status_code == 201, r.text
    return {"id": r.json()["id"], "email": email, "auth": (email, PASSWORD)}


@pytest.fixture
async def alice(client):
    return await signup(client, "alice@example.com", "alice")


@pytest.fixture
async def bob(client):
    return await signup(client, "bob@example.com", "bob")


@pytest.fixture
async def exercise_ids(client, alice):
    """Catalogue exercise ids keyed by name."""
    r = await client.get("/api/v1/exercises", auth=alice["auth"])
    assert r.status_code == 200
    return {e["name"]: e["id"] for e in r.json()}
