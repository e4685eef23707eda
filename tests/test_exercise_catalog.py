"""System exercise seeding."""

from sqlalchemy import func, select

from app.models import Exercise
from app.services.exercise_catalog import SYSTEM_EXERCISES, seed_system_exercises


def test_catalog_names_are_unique():
    names = [e["name"] for e in SYSTEM_EXERCISES]
    assert len(names) == len(set(names))
    assert {e["category"] for e in SYSTEM_EXERCISES} <= {"strength", "cardio", "flexibility"}
    assert all(e["muscle_groups"] for e in SYSTEM_EXERCISES)


async def test_seeding_is_idempotent(session_maker):
    async with session_maker() as session:
        async with session.begin():
            created, skipped = await seed_system_exercises(session)
    assert (created, skipped) == (len(SYSTEM_EXERCISES), 0)

    async with session_maker() as session:
        async with session.begin():
            created, skipped = await seed_system_exercises(session)
    assert (created, skipped) == (0, len(SYSTEM_EXERCISES))

    async with session_maker() as session:
        count = (await session.execute(select(func.count(Exercise.id)))).scalar_one()
        custom = (await session.execute(select(func.count(Exercise.id)).where(Exercise.is_custom))).scalar_one()
    assert count == len(SYSTEM_EXERCISES)
    assert custom == 0


async def test_seeding_skips_existing_system_exercise(session_maker, bench):
    async with session_maker() as session:
        async with session.begin():
            created, skipped = await seed_system_exercises(session)
    assert skipped == 1
    assert created == len(SYSTEM_EXERCISES) - 1
