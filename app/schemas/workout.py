"""Workout and WorkoutSet schemas."""

from datetime import date
from uuid import UUID

from pydantic import Field, field_validator

from app.core.enums import WeightUnit
from app.schemas.base import CamelModel
from app.schemas.exercise import ExerciseRead, ExerciseRef


class WorkoutSetCreate(CamelModel):
    exercise_id: UUID
    set_number: int = Field(..., ge=1)
    reps: int = Field(..., gt=0)
    weight: float = Field(..., ge=0)
    weight_unit: WeightUnit = WeightUnit.LBS
    notes: str | None = Field(None, max_length=500)


class WorkoutCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    date: date
    notes: str | None = None
    duration_minutes: int | None = Field(None, ge=0)
    sets: list[WorkoutSetCreate] = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class WorkoutUpdate(WorkoutCreate):
    """Header overwrite + full set replacement (same payload as create)."""


class WorkoutSetRead(CamelModel):
    id: UUID
    workout_id: UUID
    exercise_id: UUID
    set_number: int
    reps: int
    weight: float
    weight_unit: WeightUnit
    notes: str | None = None


class WorkoutSetWithExercise(WorkoutSetRead):
    exercise: ExerciseRead


class WorkoutSetWithExerciseRef(WorkoutSetRead):
    exercise: ExerciseRef


class WorkoutBase(CamelModel):
    id: UUID
    user_id: UUID
    name: str
    date: date
    notes: str | None = None
    duration_minutes: int | None = None


class WorkoutRead(WorkoutBase):
    """Workout with full exercise detail per set (detail view)."""

    sets: list[WorkoutSetWithExercise] = []


class WorkoutSummaryRead(WorkoutBase):
    """Workout with id/name/category per set (list view)."""

    sets: list[WorkoutSetWithExerciseRef] = []


class WorkoutListResponse(CamelModel):
    workouts: list[WorkoutSummaryRead]
    total: int


class WorkoutResponse(CamelModel):
    workout: WorkoutRead
