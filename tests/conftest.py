"""Shared fixtures: in-memory SQLite database, ASGI client, users, exercises."""

import os

# Before any app import: settings are cached on first use
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.enums import ExerciseCategory
from app.core.security import create_access_token
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Exercise, User


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def client(session_maker):
    """HTTP client against the app, with get_db bound to the test database."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def _add(session_maker, obj):
    async with session_maker() as session:
        session.add(obj)
        await session.commit()
        await session.refresh(obj)
    return obj


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(user.id, user.email, user.name, user.avatar_url)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def alice(session_maker):
    return await _add(session_maker, User(google_id="g-alice", email="alice@example.com", name="Alice"))


@pytest.fixture
async def bob(session_maker):
    return await _add(session_maker, User(google_id="g-bob", email="bob@example.com", name="Bob"))


@pytest.fixture
def alice_headers(alice):
    return auth_headers(alice)


@pytest.fixture
def bob_headers(bob):
    return auth_headers(bob)


@pytest.fixture
async def bench(session_maker):
    return await _add(
        session_maker,
        Exercise(
            name="Barbell Bench Press",
            category=ExerciseCategory.STRENGTH,
            muscle_groups=["Chest", "Triceps", "Shoulders"],
            equipment="Barbell",
            is_custom=False,
        ),
    )


@pytest.fixture
async def squat(session_maker):
    return await _add(
        session_maker,
        Exercise(
            name="Barbell Squat",
            category=ExerciseCategory.STRENGTH,
            muscle_groups=["Quads", "Glutes", "Hamstrings"],
            equipment="Barbell",
            is_custom=False,
        ),
    )


@pytest.fixture
async def running(session_maker):
    return await _add(
        session_maker,
        Exercise(
            name="Running",
            category=ExerciseCategory.CARDIO,
            muscle_groups=["Legs", "Cardiovascular"],
            is_custom=False,
        ),
    )
