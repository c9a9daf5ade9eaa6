"""
Dict-backed record store. State lives only as long as the store instance.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import cuid

from app.core.logger import get_logger
from app.exceptions.errors import DuplicateRecordError
from app.schemas.identity_schemas import IdentityCreate, IdentityRecord
from app.schemas.workout_schemas import WorkoutCreate, WorkoutRecord
from app.schemas.goal_schemas import GoalCreate, GoalRecord
from app.schemas.exercise_schemas import ExerciseCreate, ExerciseRecord
from app.storage.base import DEFAULT_EXERCISES, RecordStore, validate_workout_updates
from app.utils.date_ranges import current_week_range, day_bounds, to_naive_utc

logger = get_logger("memory_storage")

DEMO_USER_ID = "demo-user"


class MemoryRecordStore(RecordStore):
    """In-process store keeping one dict of rows per record type."""

    def __init__(self, seed_demo_data: bool = False, demo_password: Optional[str] = None):
        self._users: Dict[str, Dict[str, Any]] = {}
        self._workouts: Dict[str, Dict[str, Any]] = {}
        self._exercises: Dict[str, Dict[str, Any]] = {}
        self._goals: Dict[str, Dict[str, Any]] = {}

        self._seed_exercises()
        if seed_demo_data:
            self._seed_demo_data(demo_password)

    def _seed_exercises(self) -> None:
        for exercise in DEFAULT_EXERCISES:
            exercise_id = cuid.cuid()
            self._exercises[exercise_id] = {"id": exercise_id, **exercise.dict()}

    def _seed_demo_data(self, demo_password: Optional[str]) -> None:
        """Demo identity with workouts spread over the current week and two goals."""
        from app.services.password_service import hash_password

        self._users[DEMO_USER_ID] = {
            "id": DEMO_USER_ID,
            "username": DEMO_USER_ID,
            "password_hash": hash_password(demo_password) if demo_password else None,
            "is_guest": False,
            "created_at": datetime.utcnow(),
        }

        week_start, _ = current_week_range()
        sample_workouts = [
            ("Running", 30, 240, "medium", "Morning jog in the park", 1),
            ("Yoga", 45, 135, "low", "Relaxing evening session", 3),
            ("HIIT", 20, 240, "high", "Intense workout session", 5),
            ("Weight Training", 40, 280, "high", "Strength training session", 0),
        ]
        for exercise_type, duration, calories, intensity, notes, day_offset in sample_workouts:
            workout_id = cuid.cuid()
            self._workouts[workout_id] = {
                "id": workout_id,
                "user_id": DEMO_USER_ID,
                "exercise_type": exercise_type,
                "duration": duration,
                "calories": calories,
                "intensity": intensity,
                "notes": notes,
                "date": week_start + timedelta(days=day_offset),
            }

        for goal_type, target, current in (("daily_calories", 500, 240), ("weekly_workouts", 5, 3)):
            goal_id = cuid.cuid()
            self._goals[goal_id] = {
                "id": goal_id,
                "user_id": DEMO_USER_ID,
                "type": goal_type,
                "target": target,
                "current": current,
                "date": datetime.utcnow(),
            }

        logger.info(f"Seeded demo data for '{DEMO_USER_ID}'")

    # Identities
    async def get_user(self, user_id: str) -> Optional[IdentityRecord]:
        row = self._users.get(user_id)
        return IdentityRecord(**row) if row else None

    async def get_user_by_username(self, username: str) -> Optional[IdentityRecord]:
        for row in self._users.values():
            if row["username"] == username:
                return IdentityRecord(**row)
        return None

    async def create_user(self, data: IdentityCreate) -> IdentityRecord:
        user_id = data.id or cuid.cuid()
        if user_id in self._users:
            raise DuplicateRecordError(f"User id already exists: {user_id}")
        if data.username is not None and any(
            row["username"] == data.username for row in self._users.values()
        ):
            raise DuplicateRecordError(f"Username already exists: {data.username}")

        row = {**data.dict(), "id": user_id, "created_at": datetime.utcnow()}
        self._users[user_id] = row
        return IdentityRecord(**row)

    # Workouts
    async def get_workouts(self, user_id: str) -> List[WorkoutRecord]:
        rows = [row for row in self._workouts.values() if row["user_id"] == user_id]
        rows.sort(key=lambda row: row["date"], reverse=True)
        return [WorkoutRecord(**row) for row in rows]

    async def create_workout(self, user_id: str, data: WorkoutCreate) -> WorkoutRecord:
        workout_id = cuid.cuid()
        row = {
            "id": workout_id,
            "user_id": user_id,
            "exercise_type": data.exercise_type,
            "duration": data.duration,
            "calories": data.calories,
            "intensity": data.intensity.value,
            "notes": data.notes or None,
            "date": to_naive_utc(data.date) if data.date else datetime.utcnow(),
        }
        self._workouts[workout_id] = row
        return WorkoutRecord(**row)

    async def update_workout(self, workout_id: str, updates: Dict[str, Any]) -> Optional[WorkoutRecord]:
        row = self._workouts.get(workout_id)
        if row is None:
            return None
        updated = {**row, **validate_workout_updates(updates)}
        record = WorkoutRecord(**updated)
        self._workouts[workout_id] = updated
        return record

    async def get_workouts_by_date_range(
        self, user_id: str, start_date: datetime, end_date: datetime
    ) -> List[WorkoutRecord]:
        start, end = day_bounds(to_naive_utc(start_date), to_naive_utc(end_date))
        logger.debug(f"Date range filter for {user_id}: {start.isoformat()} to {end.isoformat()}")
        return [
            WorkoutRecord(**row) for row in self._workouts.values()
            if row["user_id"] == user_id and start <= row["date"] <= end
        ]

    # Exercises
    async def get_exercises(self) -> List[ExerciseRecord]:
        return [ExerciseRecord(**row) for row in self._exercises.values()]

    async def create_exercise(self, data: ExerciseCreate) -> ExerciseRecord:
        exercise_id = cuid.cuid()
        row = {"id": exercise_id, **data.dict()}
        self._exercises[exercise_id] = row
        return ExerciseRecord(**row)

    # Goals
    async def get_goals(self, user_id: str) -> List[GoalRecord]:
        return [GoalRecord(**row) for row in self._goals.values() if row["user_id"] == user_id]

    async def create_goal(self, user_id: str, data: GoalCreate) -> GoalRecord:
        goal_id = cuid.cuid()
        row = {
            "id": goal_id,
            "user_id": user_id,
            "type": data.type.value,
            "target": data.target,
            "current": 0,
            "date": datetime.utcnow(),
        }
        self._goals[goal_id] = row
        return GoalRecord(**row)

    async def update_goal(self, goal_id: str, current: float) -> Optional[GoalRecord]:
        row = self._goals.get(goal_id)
        if row is None:
            return None
        row["current"] = current
        return GoalRecord(**row)
