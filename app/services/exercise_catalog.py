"""System exercise catalog - hardcoded, seeded once per database.

Every entry is read-only to users (no owner). Seeding is idempotent: an entry
is skipped when a system exercise with the same name already exists.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import ExerciseCategory
from app.models.exercise import Exercise

logger = logging.getLogger(__name__)

SYSTEM_EXERCISES: list[dict] = [
    # Chest Exercises (7)
    {
        "name": "Barbell Bench Press",
        "description": "Classic compound chest exercise",
        "category": "strength",
        "muscle_groups": ["Chest", "Triceps", "Shoulders"],
        "equipment": "Barbell",
        "instructions": "Lie on bench, lower bar to chest, press up until arms are extended",
    },
    {
        "name": "Dumbbell Bench Press",
        "description": "Chest exercise with greater range of motion",
        "category": "strength",
        "muscle_groups": ["Chest", "Triceps", "Shoulders"],
        "equipment": "Dumbbells",
        "instructions": "Lie on bench with dumbbells, press up until arms are extended",
    },
    {
        "name": "Incline Bench Press",
        "description": "Targets upper chest",
        "category": "strength",
        "muscle_groups": ["Chest", "Triceps", "Shoulders"],
        "equipment": "Barbell",
        "instructions": "Perform bench press on inclined bench (30-45 degrees)",
    },
    {
        "name": "Decline Bench Press",
        "description": "Targets lower chest",
        "category": "strength",
        "muscle_groups": ["Chest", "Triceps"],
        "equipment": "Barbell",
        "instructions": "Perform bench press on declined bench",
    },
    {
        "name": "Chest Fly",
        "description": "Isolation exercise for chest",
        "category": "strength",
        "muscle_groups": ["Chest"],
        "equipment": "Dumbbells",
        "instructions": "Lie on bench, lower dumbbells with slight bend in elbows, bring together over chest",
    },
    {
        "name": "Push-ups",
        "description": "Classic bodyweight chest exercise",
        "category": "strength",
        "muscle_groups": ["Chest", "Triceps", "Shoulders", "Core"],
        "equipment": "Bodyweight",
        "instructions": "Lower body until chest nearly touches floor, push back up",
    },
    {
        "name": "Dips",
        "description": "Compound exercise for chest and triceps",
        "category": "strength",
        "muscle_groups": ["Chest", "Triceps", "Shoulders"],
        "equipment": "Dip Bars",
        "instructions": "Lower body by bending arms, push back up until arms are extended",
    },

    # Back Exercises (7)
    {
        "name": "Barbell Row",
        "description": "Compound back exercise",
        "category": "strength",
        "muscle_groups": ["Back", "Biceps"],
        "equipment": "Barbell",
        "instructions": "Bend at waist, pull barbell to torso, lower with control",
    },
    {
        "name": "Dumbbell Row",
        "description": "Unilateral back exercise",
        "category": "strength",
        "muscle_groups": ["Back", "Biceps"],
        "equipment": "Dumbbells",
        "instructions": "Support body with one arm, row dumbbell to hip with other arm",
    },
    {
        "name": "Pull-ups",
        "description": "Bodyweight back exercise",
        "category": "strength",
        "muscle_groups": ["Back", "Biceps"],
        "equipment": "Pull-up Bar",
        "instructions": "Hang from bar with overhand grip, pull up until chin clears bar",
    },
    {
        "name": "Chin-ups",
        "description": "Underhand grip pull-up variation",
        "category": "strength",
        "muscle_groups": ["Back", "Biceps"],
        "equipment": "Pull-up Bar",
        "instructions": "Hang from bar with underhand grip, pull up until chin clears bar",
    },
    {
        "name": "Lat Pulldown",
        "description": "Cable machine back exercise",
        "category": "strength",
        "muscle_groups": ["Back", "Biceps"],
        "equipment": "Cable Machine",
        "instructions": "Pull bar down to upper chest, return with control",
    },
    {
        "name": "Seated Cable Row",
        "description": "Horizontal pulling exercise",
        "category": "strength",
        "muscle_groups": ["Back", "Biceps"],
        "equipment": "Cable Machine",
        "instructions": "Sit upright, pull handle to torso, return with control",
    },
    {
        "name": "Deadlift",
        "description": "Full body compound exercise",
        "category": "strength",
        "muscle_groups": ["Back", "Legs", "Core"],
        "equipment": "Barbell",
        "instructions": "Lift barbell from floor by extending hips and knees, lower with control",
    },

    # Shoulder Exercises (6)
    {
        "name": "Overhead Press",
        "description": "Compound shoulder exercise",
        "category": "strength",
        "muscle_groups": ["Shoulders", "Triceps"],
        "equipment": "Barbell",
        "instructions": "Press barbell overhead from shoulders until arms are extended",
    },
    {
        "name": "Arnold Press",
        "description": "Dumbbell shoulder press variation",
        "category": "strength",
        "muscle_groups": ["Shoulders"],
        "equipment": "Dumbbells",
        "instructions": "Rotate dumbbells while pressing overhead",
    },
    {
        "name": "Lateral Raise",
        "description": "Isolation exercise for side delts",
        "category": "strength",
        "muscle_groups": ["Shoulders"],
        "equipment": "Dumbbells",
        "instructions": "Raise dumbbells to sides until parallel with floor",
    },
    {
        "name": "Front Raise",
        "description": "Isolation exercise for front delts",
        "category": "strength",
        "muscle_groups": ["Shoulders"],
        "equipment": "Dumbbells",
        "instructions": "Raise dumbbells in front until parallel with floor",
    },
    {
        "name": "Rear Delt Fly",
        "description": "Isolation exercise for rear delts",
        "category": "strength",
        "muscle_groups": ["Shoulders"],
        "equipment": "Dumbbells",
        "instructions": "Bend at waist, raise dumbbells to sides",
    },
    {
        "name": "Face Pull",
        "description": "Cable exercise for rear delts and upper back",
        "category": "strength",
        "muscle_groups": ["Shoulders", "Back"],
        "equipment": "Cable Machine",
        "instructions": "Pull rope attachment toward face, separating rope at end",
    },

    # Leg Exercises (8)
    {
        "name": "Barbell Squat",
        "description": "Compound leg exercise",
        "category": "strength",
        "muscle_groups": ["Legs", "Core"],
        "equipment": "Barbell",
        "instructions": "Lower body by bending knees and hips, return to standing",
    },
    {
        "name": "Front Squat",
        "description": "Squat variation with bar in front",
        "category": "strength",
        "muscle_groups": ["Legs", "Core"],
        "equipment": "Barbell",
        "instructions": "Hold bar across front shoulders, perform squat",
    },
    {
        "name": "Leg Press",
        "description": "Machine-based leg exercise",
        "category": "strength",
        "muscle_groups": ["Legs"],
        "equipment": "Leg Press Machine",
        "instructions": "Push platform away by extending knees and hips",
    },
    {
        "name": "Romanian Deadlift",
        "description": "Hamstring-focused exercise",
        "category": "strength",
        "muscle_groups": ["Legs", "Back"],
        "equipment": "Barbell",
        "instructions": "Lower bar by pushing hips back, keep legs mostly straight",
    },
    {
        "name": "Leg Curl",
        "description": "Isolation exercise for hamstrings",
        "category": "strength",
        "muscle_groups": ["Legs"],
        "equipment": "Leg Curl Machine",
        "instructions": "Curl legs up toward glutes, lower with control",
    },
    {
        "name": "Leg Extension",
        "description": "Isolation exercise for quadriceps",
        "category": "strength",
        "muscle_groups": ["Legs"],
        "equipment": "Leg Extension Machine",
        "instructions": "Extend legs until straight, lower with control",
    },
    {
        "name": "Calf Raise",
        "description": "Isolation exercise for calves",
        "category": "strength",
        "muscle_groups": ["Legs"],
        "equipment": "Machine or Bodyweight",
        "instructions": "Raise up on toes, lower with control",
    },
    {
        "name": "Lunges",
        "description": "Unilateral leg exercise",
        "category": "strength",
        "muscle_groups": ["Legs"],
        "equipment": "Dumbbells or Bodyweight",
        "instructions": "Step forward and lower back knee toward ground, return to standing",
    },

    # Bicep Exercises (5)
    {
        "name": "Barbell Curl",
        "description": "Classic bicep exercise",
        "category": "strength",
        "muscle_groups": ["Biceps"],
        "equipment": "Barbell",
        "instructions": "Curl barbell up, keeping elbows stationary",
    },
    {
        "name": "Dumbbell Curl",
        "description": "Bicep exercise with dumbbells",
        "category": "strength",
        "muscle_groups": ["Biceps"],
        "equipment": "Dumbbells",
        "instructions": "Curl dumbbells up, keeping elbows stationary",
    },
    {
        "name": "Hammer Curl",
        "description": "Neutral grip bicep curl",
        "category": "strength",
        "muscle_groups": ["Biceps"],
        "equipment": "Dumbbells",
        "instructions": "Curl dumbbells with palms facing each other",
    },
    {
        "name": "Preacher Curl",
        "description": "Bicep curl on preacher bench",
        "category": "strength",
        "muscle_groups": ["Biceps"],
        "equipment": "EZ Bar",
        "instructions": "Rest upper arms on pad, curl bar up",
    },
    {
        "name": "Cable Curl",
        "description": "Bicep curl using cable machine",
        "category": "strength",
        "muscle_groups": ["Biceps"],
        "equipment": "Cable Machine",
        "instructions": "Curl cable attachment up, keeping elbows stationary",
    },

    # Tricep Exercises (5)
    {
        "name": "Close-Grip Bench Press",
        "description": "Compound tricep exercise",
        "category": "strength",
        "muscle_groups": ["Triceps", "Chest"],
        "equipment": "Barbell",
        "instructions": "Bench press with hands closer than shoulder width",
    },
    {
        "name": "Tricep Dips",
        "description": "Bodyweight tricep exercise",
        "category": "strength",
        "muscle_groups": ["Triceps", "Chest"],
        "equipment": "Dip Bars",
        "instructions": "Lower body with elbows close to body, push back up",
    },
    {
        "name": "Overhead Tricep Extension",
        "description": "Isolation exercise for triceps",
        "category": "strength",
        "muscle_groups": ["Triceps"],
        "equipment": "Dumbbell",
        "instructions": "Hold weight overhead, lower behind head, extend arms",
    },
    {
        "name": "Tricep Pushdown",
        "description": "Cable tricep exercise",
        "category": "strength",
        "muscle_groups": ["Triceps"],
        "equipment": "Cable Machine",
        "instructions": "Push cable attachment down by extending elbows",
    },
    {
        "name": "Skull Crusher",
        "description": "Lying tricep extension",
        "category": "strength",
        "muscle_groups": ["Triceps"],
        "equipment": "EZ Bar",
        "instructions": "Lie on bench, lower bar toward forehead, extend arms",
    },

    # Core Exercises (6)
    {
        "name": "Plank",
        "description": "Isometric core exercise",
        "category": "strength",
        "muscle_groups": ["Core"],
        "equipment": "Bodyweight",
        "instructions": "Hold push-up position on forearms, keep body straight",
    },
    {
        "name": "Side Plank",
        "description": "Lateral core stability exercise",
        "category": "strength",
        "muscle_groups": ["Core"],
        "equipment": "Bodyweight",
        "instructions": "Hold side position on one forearm, keep body straight",
    },
    {
        "name": "Crunches",
        "description": "Basic ab exercise",
        "category": "strength",
        "muscle_groups": ["Core"],
        "equipment": "Bodyweight",
        "instructions": "Lift shoulders off ground by contracting abs",
    },
    {
        "name": "Leg Raises",
        "description": "Lower ab exercise",
        "category": "strength",
        "muscle_groups": ["Core"],
        "equipment": "Bodyweight",
        "instructions": "Lie on back, raise legs toward ceiling",
    },
    {
        "name": "Russian Twist",
        "description": "Rotational core exercise",
        "category": "strength",
        "muscle_groups": ["Core"],
        "equipment": "Bodyweight or Medicine Ball",
        "instructions": "Sit with feet off ground, twist torso side to side",
    },
    {
        "name": "Cable Crunch",
        "description": "Weighted ab exercise",
        "category": "strength",
        "muscle_groups": ["Core"],
        "equipment": "Cable Machine",
        "instructions": "Kneel facing cable machine, crunch down by contracting abs",
    },

    # Cardio Exercises (5)
    {
        "name": "Running",
        "description": "Cardiovascular endurance exercise",
        "category": "cardio",
        "muscle_groups": ["Legs", "Full Body"],
        "equipment": "None",
        "instructions": "Run at various intensities for cardiovascular fitness",
    },
    {
        "name": "Cycling",
        "description": "Low-impact cardio",
        "category": "cardio",
        "muscle_groups": ["Legs"],
        "equipment": "Bike",
        "instructions": "Cycle at various intensities for cardiovascular fitness",
    },
    {
        "name": "Rowing",
        "description": "Full-body cardio exercise",
        "category": "cardio",
        "muscle_groups": ["Full Body"],
        "equipment": "Rowing Machine",
        "instructions": "Row with proper form for cardiovascular fitness",
    },
    {
        "name": "Jump Rope",
        "description": "High-intensity cardio",
        "category": "cardio",
        "muscle_groups": ["Legs", "Full Body"],
        "equipment": "Jump Rope",
        "instructions": "Jump rope at various speeds and patterns",
    },
    {
        "name": "Burpees",
        "description": "Full-body conditioning exercise",
        "category": "cardio",
        "muscle_groups": ["Full Body"],
        "equipment": "Bodyweight",
        "instructions": "Drop to push-up position, perform push-up, jump to standing, jump up",
    },
]


async def seed_system_exercises(session: AsyncSession) -> tuple[int, int]:
    """Insert missing catalog entries. Returns (created, skipped)."""
    result = await session.execute(select(Exercise.name).where(Exercise.user_id.is_(None)))
    existing = set(result.scalars().all())

    created = skipped = 0
    for entry in SYSTEM_EXERCISES:
        if entry["name"] in existing:
            skipped += 1
            continue
        session.add(
            Exercise(
                name=entry["name"],
                description=entry.get("description"),
                category=ExerciseCategory(entry["category"]),
                muscle_groups=list(entry["muscle_groups"]),
                equipment=entry.get("equipment"),
                instructions=entry.get("instructions"),
                is_custom=False,
                user_id=None,
            )
        )
        existing.add(entry["name"])
        created += 1
    await session.flush()
    logger.info("Seeded system exercises: %d created, %d skipped", created, skipped)
    return created, skipped
