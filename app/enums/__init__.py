"""
Shared enums for the application.
"""

from .fitness_enums import (
    IntensityLevel,
    GoalType,
    ExerciseCategory
)

__all__ = [
    "IntensityLevel",
    "GoalType",
    "ExerciseCategory"
]
