"""Exercise model - shared catalog of system exercises plus user-authored ones."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import ExerciseCategory
from app.db.base import Base, utcnow


class Exercise(Base):
    """Exercise definition. System exercises have no owner and are read-only."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    category: Mapped[ExerciseCategory] = mapped_column(
        Enum(
            ExerciseCategory,
            name="exercise_category",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    # Ordered labels, e.g. ["Chest", "Triceps", "Shoulders"]
    muscle_groups: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list
    )
    equipment: Mapped[str | None] = mapped_column(String(255), nullable=True)
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_custom: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    user: Mapped["User | None"] = relationship("User", back_populates="custom_exercises")
    workout_sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet", back_populates="exercise", passive_deletes=True
    )
    template_entries: Mapped[list["TemplateExercise"]] = relationship(
        "TemplateExercise", back_populates="exercise", passive_deletes=True
    )

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.is_custom and self.user_id == user_id
