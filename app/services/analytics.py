"""Analytics aggregation: progress, personal records, frequency, volume, streak.

All functions take plain rows fetched by the endpoints and group/reduce them in
memory. Weights are normalized to pounds before any comparison or sum.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Any

from app.core.constants import KG_TO_LBS
from app.core.enums import WeightUnit


def to_lbs(weight: float, unit: WeightUnit | str) -> float:
    """Normalize a weight to pounds (kg * 2.20462; lbs unchanged)."""
    if WeightUnit(unit) == WeightUnit.KG:
        return float(weight) * KG_TO_LBS
    return float(weight)


def exercise_progress(
    rows: Iterable[tuple[date, float, WeightUnit | str, int]],
) -> list[dict[str, Any]]:
    """
    Group sets of one exercise by workout date.
    rows: (workout_date, weight, weight_unit, reps).
    Per date: max normalized weight, total volume (weight * reps), total reps, set count.
    """
    by_date: dict[date, dict[str, Any]] = {}
    for day, weight, unit, reps in rows:
        w = to_lbs(weight, unit)
        point = by_date.get(day)
        if point is None:
            by_date[day] = {
                "date": day,
                "max_weight": w,
                "total_volume": w * reps,
                "total_reps": reps,
                "sets": 1,
            }
        else:
            point["max_weight"] = max(point["max_weight"], w)
            point["total_volume"] += w * reps
            point["total_reps"] += reps
            point["sets"] += 1
    return [by_date[d] for d in sorted(by_date)]


def personal_records(
    rows: Iterable[tuple[uuid.UUID, str, float, WeightUnit | str, int, date]],
) -> list[dict[str, Any]]:
    """
    Heaviest normalized set per exercise; equal weights keep the higher rep count.
    rows: (exercise_id, exercise_name, weight, weight_unit, reps, workout_date).
    Sorted by exercise name.
    """
    best: dict[uuid.UUID, dict[str, Any]] = {}
    for exercise_id, exercise_name, weight, unit, reps, day in rows:
        w = to_lbs(weight, unit)
        current = best.get(exercise_id)
        if (
            current is None
            or w > current["max_weight"]
            or (w == current["max_weight"] and reps > current["reps"])
        ):
            best[exercise_id] = {
                "exercise_id": exercise_id,
                "exercise_name": exercise_name,
                "max_weight": w,
                "reps": reps,
                "date": day,
            }
    return sorted(best.values(), key=lambda r: r["exercise_name"].lower())


def week_start(day: date) -> date:
    """Sunday on or before the given day."""
    # date.weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def workout_frequency(dates: Iterable[date]) -> list[dict[str, Any]]:
    """Count workouts per Sunday-start week, ascending by week."""
    counts: dict[date, int] = {}
    for day in sorted(dates):
        key = week_start(day)
        counts[key] = counts.get(key, 0) + 1
    return [{"week": week, "count": n} for week, n in counts.items()]


def volume_by_date(
    rows: Iterable[tuple[date, float, WeightUnit | str, int]],
) -> list[dict[str, Any]]:
    """
    Total normalized volume (weight * reps) and set count per workout date.
    rows: (workout_date, weight, weight_unit, reps). Ascending by date.
    """
    by_date: dict[date, dict[str, Any]] = {}
    for day, weight, unit, reps in rows:
        volume = to_lbs(weight, unit) * reps
        point = by_date.setdefault(day, {"date": day, "volume": 0.0, "sets": 0})
        point["volume"] += volume
        point["sets"] += 1
    return [by_date[d] for d in sorted(by_date)]


def current_streak(dates: Iterable[date]) -> int:
    """
    Consecutive calendar days with a workout, ending at the most recent workout.
    Several workouts on one day count once; any gap of more than a day ends the run.
    """
    days = sorted(set(dates), reverse=True)
    if not days:
        return 0
    streak = 1
    for previous, day in zip(days, days[1:]):
        if previous - day == timedelta(days=1):
            streak += 1
        else:
            break
    return streak
