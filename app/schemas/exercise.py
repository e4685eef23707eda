"""Exercise schemas."""

from uuid import UUID

from pydantic import Field, field_validator

from app.core.enums import ExerciseCategory
from app.schemas.base import CamelModel


class ExerciseBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    category: ExerciseCategory
    muscle_groups: list[str] = Field(..., min_length=1)
    equipment: str | None = Field(None, max_length=255)
    instructions: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("muscle_groups")
    @classmethod
    def muscle_groups_not_blank(cls, v: list[str]) -> list[str]:
        cleaned = [m.strip() for m in v if m and m.strip()]
        if not cleaned:
            raise ValueError("at least one muscle group is required")
        return cleaned


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(ExerciseBase):
    """Full overwrite of a custom exercise (same fields as create)."""


class ExerciseRead(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    category: ExerciseCategory
    muscle_groups: list[str] = []
    equipment: str | None = None
    instructions: str | None = None
    is_custom: bool = False


class ExerciseRef(CamelModel):
    """Minimal exercise info for embedding in workout list responses."""

    id: UUID
    name: str
    category: ExerciseCategory


class ExerciseListResponse(CamelModel):
    exercises: list[ExerciseRead]


class ExerciseResponse(CamelModel):
    exercise: ExerciseRead
