"""Workout template schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.exercise import ExerciseRead


class TemplateExerciseCreate(CamelModel):
    exercise_id: UUID
    # Accepted for client convenience; the stored index is the entry's position
    order_index: int | None = None
    default_sets: int | None = Field(None, ge=0)
    default_reps: int | None = Field(None, ge=0)
    default_weight: float | None = Field(None, ge=0)
    notes: str | None = Field(None, max_length=500)


class WorkoutTemplateCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    exercises: list[TemplateExerciseCreate] = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class WorkoutTemplateUpdate(WorkoutTemplateCreate):
    """Header overwrite + full exercise list replacement."""


class TemplateExerciseRead(CamelModel):
    id: UUID
    template_id: UUID
    exercise_id: UUID
    order_index: int
    default_sets: int | None = None
    default_reps: int | None = None
    default_weight: float | None = None
    notes: str | None = None
    exercise: ExerciseRead


class WorkoutTemplateRead(CamelModel):
    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    created_at: datetime
    exercises: list[TemplateExerciseRead] = []


class TemplateListResponse(CamelModel):
    templates: list[WorkoutTemplateRead]


class TemplateResponse(CamelModel):
    template: WorkoutTemplateRead
