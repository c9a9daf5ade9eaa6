"""
Models package for the application.
"""

from .user import User
from .workout import Workout
from .goal import Goal
from .exercise import Exercise

__all__ = [
    "User",
    "Workout",
    "Goal",
    "Exercise",
]
