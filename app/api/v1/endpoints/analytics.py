"""Analytics: exercise progress, personal records, frequency, volume, summary.

Queries fetch the caller's rows; grouping and arithmetic happen in
app.services.analytics.
"""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.analytics import (
    FrequencyResponse,
    PersonalRecordsResponse,
    ProgressResponse,
    SummaryResponse,
    VolumeResponse,
)
from app.schemas.auth import UserRead
from app.services.analytics import (
    current_streak,
    exercise_progress,
    personal_records,
    volume_by_date,
    workout_frequency,
)

router = APIRouter()


def _date_bounds(start_date: date | None, end_date: date | None) -> list:
    conditions = []
    if start_date:
        conditions.append(Workout.date >= start_date)
    if end_date:
        conditions.append(Workout.date <= end_date)
    return conditions


@router.get("/progress/{exercise_id}", response_model=ProgressResponse)
async def progress(
    exercise_id: uuid.UUID,
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Per workout day: max weight, total volume, total reps and set count (weights in lbs)."""
    result = await db.execute(
        select(Workout.date, WorkoutSet.weight, WorkoutSet.weight_unit, WorkoutSet.reps)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(
            Workout.user_id == user.id,
            WorkoutSet.exercise_id == exercise_id,
            *_date_bounds(start_date, end_date),
        )
        .order_by(Workout.date.asc())
    )
    return {"progress": exercise_progress(result.all())}


@router.get("/personal-records", response_model=PersonalRecordsResponse)
async def get_personal_records(
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Heaviest set per exercise (ties go to more reps), sorted by exercise name."""
    result = await db.execute(
        select(
            Exercise.id,
            Exercise.name,
            WorkoutSet.weight,
            WorkoutSet.weight_unit,
            WorkoutSet.reps,
            Workout.date,
        )
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .join(Exercise, Exercise.id == WorkoutSet.exercise_id)
        .where(Workout.user_id == user.id)
        .order_by(Workout.date.asc())
    )
    return {"personal_records": personal_records(result.all())}


@router.get("/workout-frequency", response_model=FrequencyResponse)
async def get_workout_frequency(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Workouts per week (weeks start on Sunday)."""
    result = await db.execute(
        select(Workout.date)
        .where(Workout.user_id == user.id, *_date_bounds(start_date, end_date))
        .order_by(Workout.date.asc())
    )
    return {"frequency": workout_frequency(result.scalars().all())}


@router.get("/volume", response_model=VolumeResponse)
async def get_volume(
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    exercise_id: uuid.UUID | None = Query(None, alias="exerciseId"),
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Total volume (weight x reps, lbs) and set count per workout day."""
    conditions = [Workout.user_id == user.id, *_date_bounds(start_date, end_date)]
    if exercise_id:
        conditions.append(WorkoutSet.exercise_id == exercise_id)
    result = await db.execute(
        select(Workout.date, WorkoutSet.weight, WorkoutSet.weight_unit, WorkoutSet.reps)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(*conditions)
        .order_by(Workout.date.asc())
    )
    return {"volume_data": volume_by_date(result.all())}


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Total workouts, distinct exercises used, current streak and the latest workout."""
    total_workouts = (
        await db.execute(select(func.count(Workout.id)).where(Workout.user_id == user.id))
    ).scalar_one()

    unique_exercises = (
        await db.execute(
            select(func.count(distinct(WorkoutSet.exercise_id)))
            .join(Workout, Workout.id == WorkoutSet.workout_id)
            .where(Workout.user_id == user.id)
        )
    ).scalar_one()

    # All distinct workout days, so long histories are not truncated
    days = (
        await db.execute(
            select(Workout.date)
            .distinct()
            .where(Workout.user_id == user.id)
            .order_by(Workout.date.desc())
        )
    ).scalars().all()

    last = (
        await db.execute(
            select(Workout.date, Workout.name)
            .where(Workout.user_id == user.id)
            .order_by(Workout.date.desc(), Workout.created_at.desc())
            .limit(1)
        )
    ).first()

    return {
        "summary": {
            "total_workouts": total_workouts,
            "unique_exercises": unique_exercises,
            "current_streak": current_streak(days),
            "last_workout": {"date": last.date, "name": last.name} if last else None,
        }
    }
