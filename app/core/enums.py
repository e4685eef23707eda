"""Shared enums for models and API."""

from enum import Enum


class ExerciseCategory(str, Enum):
    """Broad kind of exercise."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"


class WeightUnit(str, Enum):
    """Unit a set's weight was logged in."""

    LBS = "lbs"
    KG = "kg"
