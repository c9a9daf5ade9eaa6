"""
Goal Controller
"""
from typing import List

from app.exceptions.errors import NotFoundError
from app.schemas.goal_schemas import GoalCreate, GoalProgressUpdate, GoalRecord
from app.storage.base import RecordStore


class GoalController:
    """Controller for owner-scoped goal operations."""

    @staticmethod
    async def list_goals(store: RecordStore, user_id: str) -> List[GoalRecord]:
        return await store.get_goals(user_id)

    @staticmethod
    async def create_goal(store: RecordStore, user_id: str, goal_data: GoalCreate) -> GoalRecord:
        return await store.create_goal(user_id, goal_data)

    @staticmethod
    async def update_progress(
        store: RecordStore, user_id: str, goal_id: str, progress: GoalProgressUpdate
    ) -> GoalRecord:
        owned_ids = {g.id for g in await store.get_goals(user_id)}
        if goal_id not in owned_ids:
            raise NotFoundError("Goal", goal_id)

        goal = await store.update_goal(goal_id, progress.current)
        if goal is None:
            raise NotFoundError("Goal", goal_id)
        return goal
