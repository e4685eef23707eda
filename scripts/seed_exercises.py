"""Seed the system exercise catalog into the configured database.

Usage: python scripts/seed_exercises.py
"""

import asyncio
import logging
import os
import sys

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from app.db.session import async_session_maker, engine
from app.services.exercise_catalog import SYSTEM_EXERCISES, seed_system_exercises

logger = logging.getLogger("seed_exercises")


async def main() -> None:
    logger.info("Seeding %d exercises...", len(SYSTEM_EXERCISES))
    async with async_session_maker() as session:
        async with session.begin():
            created, skipped = await seed_system_exercises(session)
    await engine.dispose()
    logger.info("Created %d new exercises, skipped %d existing", created, skipped)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(main())
