"""Exercise catalog endpoints: system exercises plus the caller's custom ones."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.core.enums import ExerciseCategory
from app.core.exceptions import Forbidden, NotFound
from app.db.session import get_db
from app.models.exercise import Exercise
from app.schemas.auth import UserRead
from app.schemas.exercise import (
    ExerciseCreate,
    ExerciseListResponse,
    ExerciseRead,
    ExerciseResponse,
    ExerciseUpdate,
)
from app.services.catalog import detach_exercise, visible_to

router = APIRouter()


async def _get_owned_exercise(db: AsyncSession, exercise_id: uuid.UUID, user_id: uuid.UUID) -> Exercise:
    exercise = await db.get(Exercise, exercise_id)
    if exercise is None:
        raise NotFound("Exercise not found")
    if not exercise.is_owned_by(user_id):
        raise Forbidden("Cannot modify this exercise")
    return exercise


@router.get("", response_model=ExerciseListResponse)
async def list_exercises(
    category: ExerciseCategory | None = None,
    muscle_group: str | None = Query(None, alias="muscleGroup"),
    search: str | None = None,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """System exercises first, then custom; each group by name."""
    stmt = select(Exercise).where(visible_to(user.id))
    if category:
        stmt = stmt.where(Exercise.category == category)
    if search:
        # Literal substring match: LIKE metacharacters in the query are escaped
        pattern = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        stmt = stmt.where(Exercise.name.ilike(f"%{pattern}%", escape="\\"))
    stmt = stmt.order_by(Exercise.is_custom.asc(), Exercise.name.asc())
    result = await db.execute(stmt)
    exercises = result.scalars().all()
    # Membership test on the JSON list is done here to stay portable across backends
    if muscle_group:
        exercises = [e for e in exercises if muscle_group in (e.muscle_groups or [])]
    return {"exercises": [ExerciseRead.model_validate(e) for e in exercises]}


@router.post("", response_model=ExerciseResponse, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a custom exercise owned by the caller."""
    exercise = Exercise(**payload.model_dump(), is_custom=True, user_id=user.id)
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return {"exercise": ExerciseRead.model_validate(exercise)}


@router.put("/{exercise_id}", response_model=ExerciseResponse)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Overwrite every field of a custom exercise the caller owns."""
    exercise = await _get_owned_exercise(db, exercise_id, user.id)
    for k, v in payload.model_dump().items():
        setattr(exercise, k, v)
    await db.flush()
    await db.refresh(exercise)
    return {"exercise": ExerciseRead.model_validate(exercise)}


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a custom exercise; its sets and template entries go with it."""
    exercise = await _get_owned_exercise(db, exercise_id, user.id)
    await detach_exercise(db, exercise)
    await db.delete(exercise)
    return None
