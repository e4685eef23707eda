"""API router aggregation (mounted under /api)."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    analytics,
    auth,
    exercises,
    health,
    templates,
    workouts,
)

api_router = APIRouter()


@api_router.get("", include_in_schema=False)
async def api_root():
    return {"message": "Fitness Tracker API v1"}


api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
