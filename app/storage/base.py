"""
Record store contract shared by the in-memory and relational backends.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from app.schemas.identity_schemas import IdentityCreate, IdentityRecord
from app.schemas.workout_schemas import WorkoutCreate, WorkoutRecord, WorkoutUpdate
from app.schemas.goal_schemas import GoalCreate, GoalRecord
from app.schemas.exercise_schemas import ExerciseCreate, ExerciseRecord
from app.utils.date_ranges import to_naive_utc


DEFAULT_EXERCISES = [
    ExerciseCreate(name="Running", category="cardio", calories_per_minute=8, emoji="🏃‍♂️"),
    ExerciseCreate(name="Push-ups", category="strength", calories_per_minute=5, emoji="💪"),
    ExerciseCreate(name="Yoga", category="flexibility", calories_per_minute=3, emoji="🧘‍♀️"),
    ExerciseCreate(name="HIIT", category="cardio", calories_per_minute=12, emoji="⚡"),
    ExerciseCreate(name="Cycling", category="cardio", calories_per_minute=6, emoji="🚴‍♂️"),
    ExerciseCreate(name="Swimming", category="cardio", calories_per_minute=10, emoji="🏊‍♂️"),
    ExerciseCreate(name="Weight Training", category="strength", calories_per_minute=7, emoji="🏋️‍♂️"),
    ExerciseCreate(name="Pilates", category="flexibility", calories_per_minute=4, emoji="🤸‍♀️"),
]

# Keys a partial workout update may never change
IMMUTABLE_WORKOUT_FIELDS = ("id", "user_id")


class RecordStore(ABC):
    """Persistence for identities, workouts, goals and the exercise catalog.

    Single-record writes are atomic; nothing spans records. ``update_*``
    methods return ``None`` when the target id does not exist. Backend faults
    raise ``RecordStoreError``; unique-key clashes raise ``DuplicateRecordError``.
    """

    async def initialize(self) -> None:
        """Prepare the backend and seed the exercise catalog."""

    async def close(self) -> None:
        """Release backend resources."""

    # Identities
    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[IdentityRecord]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[IdentityRecord]:
        ...

    @abstractmethod
    async def create_user(self, data: IdentityCreate) -> IdentityRecord:
        ...

    # Workouts
    @abstractmethod
    async def get_workouts(self, user_id: str) -> List[WorkoutRecord]:
        ...

    @abstractmethod
    async def create_workout(self, user_id: str, data: WorkoutCreate) -> WorkoutRecord:
        ...

    @abstractmethod
    async def update_workout(self, workout_id: str, updates: Dict[str, Any]) -> Optional[WorkoutRecord]:
        ...

    @abstractmethod
    async def get_workouts_by_date_range(
        self, user_id: str, start_date: datetime, end_date: datetime
    ) -> List[WorkoutRecord]:
        ...

    # Exercises
    @abstractmethod
    async def get_exercises(self) -> List[ExerciseRecord]:
        ...

    @abstractmethod
    async def create_exercise(self, data: ExerciseCreate) -> ExerciseRecord:
        ...

    # Goals
    @abstractmethod
    async def get_goals(self, user_id: str) -> List[GoalRecord]:
        ...

    @abstractmethod
    async def create_goal(self, user_id: str, data: GoalCreate) -> GoalRecord:
        ...

    @abstractmethod
    async def update_goal(self, goal_id: str, current: float) -> Optional[GoalRecord]:
        ...


def clean_workout_updates(updates: Dict[str, Any]) -> Dict[str, Any]:
    """Drop owner/id keys and explicit nulls from a partial workout update."""
    return {
        key: value for key, value in updates.items()
        if key not in IMMUTABLE_WORKOUT_FIELDS and value is not None
    }


def validate_workout_updates(updates: Dict[str, Any]) -> Dict[str, Any]:
    """Clean and validate a partial workout update before any row is touched.

    Raises ``pydantic.ValidationError`` for values a stored workout could not
    hold, so a rejected update leaves the record unchanged. Unknown keys are
    dropped; enums come back as their plain values and dates as naive UTC.
    """
    validated = WorkoutUpdate(**clean_workout_updates(updates))
    changes = {}
    for key, value in validated.dict(exclude_unset=True, exclude_none=True).items():
        if isinstance(value, Enum):
            value = value.value
        elif key == "date":
            value = to_naive_utc(value)
        changes[key] = value
    return changes
