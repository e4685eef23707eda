"""Workout CRUD endpoints. A workout and its sets are always written together."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_current_user
from app.core.constants import DEFAULT_WORKOUT_PAGE_SIZE
from app.core.exceptions import NotFound
from app.db.session import get_db
from app.models.workout import Workout, WorkoutSet
from app.schemas.auth import UserRead
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutListResponse,
    WorkoutRead,
    WorkoutResponse,
    WorkoutSummaryRead,
    WorkoutUpdate,
)
from app.services.catalog import ensure_exercises_visible
from app.services.workout_sets import build_sets

router = APIRouter()


async def _get_owned_workout(db: AsyncSession, workout_id: uuid.UUID, user_id: uuid.UUID) -> Workout:
    """Workout with sets and their exercises; NotFound if absent or someone else's."""
    result = await db.execute(
        select(Workout)
        .where(Workout.id == workout_id, Workout.user_id == user_id)
        .options(selectinload(Workout.sets).selectinload(WorkoutSet.exercise))
        .execution_options(populate_existing=True)
    )
    workout = result.scalar_one_or_none()
    if not workout:
        raise NotFound("Workout not found")
    return workout


@router.get("", response_model=WorkoutListResponse)
async def list_workouts(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    limit: int = Query(DEFAULT_WORKOUT_PAGE_SIZE, ge=1),
    offset: int = Query(0, ge=0),
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Newest first, with sets; total counts every match regardless of paging."""
    conditions = [Workout.user_id == user.id]
    if start_date:
        conditions.append(Workout.date >= start_date)
    if end_date:
        conditions.append(Workout.date <= end_date)

    total = (await db.execute(select(func.count(Workout.id)).where(*conditions))).scalar_one()
    result = await db.execute(
        select(Workout)
        .where(*conditions)
        .options(selectinload(Workout.sets).selectinload(WorkoutSet.exercise))
        .order_by(Workout.date.desc(), Workout.created_at.desc())
        .offset(offset)
        .limit(limit)
    )
    workouts = result.scalars().all()
    return {
        "workouts": [WorkoutSummaryRead.model_validate(w) for w in workouts],
        "total": total,
    }


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: uuid.UUID,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a workout with all sets (and full exercise info)."""
    workout = await _get_owned_workout(db, workout_id, user.id)
    return {"workout": WorkoutRead.model_validate(workout)}


@router.post("", response_model=WorkoutResponse, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Log a workout with its sets in one transaction."""
    await ensure_exercises_visible(db, user.id, (s.exercise_id for s in payload.sets))
    workout = Workout(
        user_id=user.id,
        name=payload.name,
        date=payload.date,
        notes=payload.notes,
        duration_minutes=payload.duration_minutes,
        sets=build_sets(payload.sets),
    )
    db.add(workout)
    await db.flush()
    workout = await _get_owned_workout(db, workout.id, user.id)
    return {"workout": WorkoutRead.model_validate(workout)}


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Overwrite the header and replace every set, in one transaction."""
    workout = await _get_owned_workout(db, workout_id, user.id)
    await ensure_exercises_visible(db, user.id, (s.exercise_id for s in payload.sets))

    workout.name = payload.name
    workout.date = payload.date
    workout.notes = payload.notes
    workout.duration_minutes = payload.duration_minutes
    # Old sets are deleted before the new ones are inserted
    workout.sets.clear()
    await db.flush()
    workout.sets.extend(build_sets(payload.sets))
    await db.flush()

    workout = await _get_owned_workout(db, workout_id, user.id)
    return {"workout": WorkoutRead.model_validate(workout)}


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its sets."""
    workout = await _get_owned_workout(db, workout_id, user.id)
    await db.delete(workout)
    return None
