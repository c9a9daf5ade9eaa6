"""
Workout Controller
"""
from datetime import datetime
from typing import List, Optional

from app.exceptions.errors import NotFoundError
from app.schemas.workout_schemas import WorkoutCreate, WorkoutRecord, WorkoutUpdate
from app.storage.base import RecordStore
from app.utils.date_ranges import current_week_range
from app.core.logger import get_logger

logger = get_logger("workout_controller")


class WorkoutController:
    """Controller for owner-scoped workout operations."""

    @staticmethod
    async def list_workouts(store: RecordStore, user_id: str) -> List[WorkoutRecord]:
        return await store.get_workouts(user_id)

    @staticmethod
    async def create_workout(
        store: RecordStore, user_id: str, workout_data: WorkoutCreate
    ) -> WorkoutRecord:
        workout = await store.create_workout(user_id, workout_data)
        logger.info(f"Logged workout {workout.id} ({workout.exercise_type}) for {user_id}")
        return workout

    @staticmethod
    async def update_workout(
        store: RecordStore, user_id: str, workout_id: str, updates: WorkoutUpdate
    ) -> WorkoutRecord:
        owned_ids = {w.id for w in await store.get_workouts(user_id)}
        if workout_id not in owned_ids:
            raise NotFoundError("Workout", workout_id)

        workout = await store.update_workout(workout_id, updates.dict(exclude_unset=True, exclude_none=True))
        if workout is None:
            raise NotFoundError("Workout", workout_id)
        return workout

    @staticmethod
    async def weekly_workouts(
        store: RecordStore, user_id: str, now: Optional[datetime] = None
    ) -> List[WorkoutRecord]:
        """Workouts from Monday through Sunday of the current week."""
        start_date, end_date = current_week_range(now)
        workouts = await store.get_workouts_by_date_range(user_id, start_date, end_date)
        logger.debug(
            f"Weekly range {start_date.isoformat()} to {end_date.isoformat()}: "
            f"{len(workouts)} workouts for {user_id}"
        )
        return workouts
