"""
API v1 routes package.
"""

from .auth_routes import router as auth_router
from .workout_routes import router as workout_router
from .exercise_routes import router as exercise_router
from .goal_routes import router as goal_router

__all__ = [
    "auth_router",
    "workout_router",
    "exercise_router",
    "goal_router"
]
