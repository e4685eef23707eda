"""Exercise visibility and removal of a custom exercise from workouts/templates."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ValidationError
from app.models.exercise import Exercise
from app.models.template import TemplateExercise, WorkoutTemplate
from app.models.workout import Workout, WorkoutSet
from app.services.workout_sets import renumber_sets


def visible_to(user_id: uuid.UUID):
    """System exercises plus the user's own custom ones."""
    return or_(Exercise.user_id.is_(None), Exercise.user_id == user_id)


async def ensure_exercises_visible(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_ids: Iterable[uuid.UUID],
) -> None:
    """Raise ValidationError unless every id is a system exercise or one of the user's own."""
    wanted = set(exercise_ids)
    if not wanted:
        return
    result = await db.execute(
        select(Exercise.id).where(Exercise.id.in_(wanted), visible_to(user_id))
    )
    missing = wanted - set(result.scalars().all())
    if missing:
        raise ValidationError(f"Unknown exercise: {sorted(str(m) for m in missing)[0]}")


async def detach_exercise(db: AsyncSession, exercise: Exercise) -> None:
    """
    Remove every set and template entry that references the exercise, keeping
    set numbers 1..N and template order 0..N-1 contiguous in what remains.
    """
    workouts = (
        await db.execute(
            select(Workout)
            .where(Workout.sets.any(WorkoutSet.exercise_id == exercise.id))
            .options(selectinload(Workout.sets))
        )
    ).scalars().all()
    for workout in workouts:
        workout.sets[:] = [s for s in workout.sets if s.exercise_id != exercise.id]

    templates = (
        await db.execute(
            select(WorkoutTemplate)
            .where(WorkoutTemplate.exercises.any(TemplateExercise.exercise_id == exercise.id))
            .options(selectinload(WorkoutTemplate.exercises))
        )
    ).scalars().all()
    for template in templates:
        template.exercises[:] = [e for e in template.exercises if e.exercise_id != exercise.id]

    # Orphans are deleted first, then the survivors renumbered
    await db.flush()
    for workout in workouts:
        renumber_sets(workout.sets)
    for template in templates:
        for i, entry in enumerate(template.exercises):
            entry.order_index = i
    await db.flush()
