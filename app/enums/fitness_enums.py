"""
Fitness tracking enums for the application.
"""

from enum import Enum


class IntensityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GoalType(str, Enum):
    DAILY_CALORIES = "daily_calories"
    WEEKLY_WORKOUTS = "weekly_workouts"
    WEEKLY_MINUTES = "weekly_minutes"
    DAILY_WORKOUTS = "daily_workouts"


class ExerciseCategory(str, Enum):
    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
