"""Analytics response schemas."""

from datetime import date
from uuid import UUID

from app.schemas.base import CamelModel


class ProgressPoint(CamelModel):
    date: date
    max_weight: float
    total_volume: float
    total_reps: int
    sets: int


class ProgressResponse(CamelModel):
    progress: list[ProgressPoint]


class PersonalRecord(CamelModel):
    exercise_id: UUID
    exercise_name: str
    max_weight: float
    reps: int
    date: date


class PersonalRecordsResponse(CamelModel):
    personal_records: list[PersonalRecord]


class FrequencyPoint(CamelModel):
    week: date
    count: int


class FrequencyResponse(CamelModel):
    frequency: list[FrequencyPoint]


class VolumePoint(CamelModel):
    date: date
    volume: float
    sets: int


class VolumeResponse(CamelModel):
    volume_data: list[VolumePoint]


class LastWorkout(CamelModel):
    date: date
    name: str


class Summary(CamelModel):
    total_workouts: int
    unique_exercises: int
    current_streak: int
    last_workout: LastWorkout | None = None


class SummaryResponse(CamelModel):
    summary: Summary
