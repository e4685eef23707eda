"""Building set/template-entry collections from request payloads."""

from __future__ import annotations

from collections.abc import Sequence

from app.models.template import TemplateExercise
from app.models.workout import WorkoutSet
from app.schemas.template import TemplateExerciseCreate
from app.schemas.workout import WorkoutSetCreate


def build_sets(payload: Sequence[WorkoutSetCreate]) -> list[WorkoutSet]:
    """
    New WorkoutSet rows in submitted order, numbered 1..N.
    Clients may number sets per exercise; the stored number is per workout.
    """
    return [
        WorkoutSet(
            exercise_id=s.exercise_id,
            set_number=i,
            reps=s.reps,
            weight=s.weight,
            weight_unit=s.weight_unit,
            notes=s.notes,
        )
        for i, s in enumerate(payload, start=1)
    ]


def renumber_sets(sets: Sequence[WorkoutSet]) -> None:
    """Close gaps so set numbers run 1..N in their current order."""
    for i, s in enumerate(sorted(sets, key=lambda x: x.set_number), start=1):
        s.set_number = i


def build_template_entries(payload: Sequence[TemplateExerciseCreate]) -> list[TemplateExercise]:
    """Template entries with order_index = position in the submitted list."""
    return [
        TemplateExercise(
            exercise_id=e.exercise_id,
            order_index=i,
            default_sets=e.default_sets,
            default_reps=e.default_reps,
            default_weight=e.default_weight,
            notes=e.notes,
        )
        for i, e in enumerate(payload)
    ]
