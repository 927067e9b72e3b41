"""Shared enums for models and API."""

from enum import Enum


class WorkoutType(str, Enum):
    """Kind of workout session."""

    STRENGTH = "Strength"
    CARDIO = "Cardio"
    FLEXIBILITY = "Flexibility"
    HIIT = "HIIT"
    RECOVERY = "Recovery"


class GoalCategory(str, Enum):
    """What a goal is about."""

    STRENGTH = "Strength"
    CARDIO = "Cardio"
    FLEXIBILITY = "Flexibility"
    CONSISTENCY = "Consistency"
    NUTRITION = "Nutrition"
    RECOVERY = "Recovery"


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class HeightUnit(str, Enum):
    CM = "cm"
    FT = "ft"
