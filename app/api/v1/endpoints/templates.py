"""Workout templates - reusable exercise lists with default sets/reps/weight."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_current_user
from app.core.exceptions import NotFound
from app.db.session import get_db
from app.models.template import TemplateExercise, WorkoutTemplate
from app.schemas.auth import UserRead
from app.schemas.template import (
    TemplateListResponse,
    TemplateResponse,
    WorkoutTemplateCreate,
    WorkoutTemplateRead,
    WorkoutTemplateUpdate,
)
from app.services.catalog import ensure_exercises_visible
from app.services.workout_sets import build_template_entries

router = APIRouter()


def _template_query():
    return select(WorkoutTemplate).options(
        selectinload(WorkoutTemplate.exercises).selectinload(TemplateExercise.exercise)
    )


async def _get_owned_template(db: AsyncSession, template_id: uuid.UUID, user_id: uuid.UUID) -> WorkoutTemplate:
    result = await db.execute(
        _template_query()
        .where(WorkoutTemplate.id == template_id, WorkoutTemplate.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    t = result.scalar_one_or_none()
    if not t:
        raise NotFound("Template not found")
    return t


@router.get("", response_model=TemplateListResponse)
async def list_templates(
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All of the caller's templates, newest first."""
    result = await db.execute(
        _template_query()
        .where(WorkoutTemplate.user_id == user.id)
        .order_by(WorkoutTemplate.created_at.desc())
    )
    return {"templates": [WorkoutTemplateRead.model_validate(t) for t in result.scalars().all()]}


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: uuid.UUID,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a template with its exercises."""
    t = await _get_owned_template(db, template_id, user.id)
    return {"template": WorkoutTemplateRead.model_validate(t)}


@router.post("", response_model=TemplateResponse, status_code=201)
async def create_template(
    payload: WorkoutTemplateCreate,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a template; exercise order is the order submitted."""
    await ensure_exercises_visible(db, user.id, (e.exercise_id for e in payload.exercises))
    t = WorkoutTemplate(
        user_id=user.id,
        name=payload.name,
        description=payload.description,
        exercises=build_template_entries(payload.exercises),
    )
    db.add(t)
    await db.flush()
    t = await _get_owned_template(db, t.id, user.id)
    return {"template": WorkoutTemplateRead.model_validate(t)}


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: uuid.UUID,
    payload: WorkoutTemplateUpdate,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Overwrite name/description and replace the whole exercise list."""
    t = await _get_owned_template(db, template_id, user.id)
    await ensure_exercises_visible(db, user.id, (e.exercise_id for e in payload.exercises))

    t.name = payload.name
    t.description = payload.description
    t.exercises.clear()
    await db.flush()
    t.exercises.extend(build_template_entries(payload.exercises))
    await db.flush()

    t = await _get_owned_template(db, template_id, user.id)
    return {"template": WorkoutTemplateRead.model_validate(t)}


@router.delete("/{template_id}", status_code=204)
async def delete_template(
    template_id: uuid.UUID,
    user: UserRead = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a template and its exercise entries."""
    t = await _get_owned_template(db, template_id, user.id)
    await db.delete(t)
    return None
