"""
Goal Routes
"""
from typing import List

from fastapi import APIRouter, Depends

from app.middlewares.session_identity import get_current_identity, get_record_store
from app.api.v1.controllers.goal_controller import GoalController
from app.schemas.identity_schemas import SessionResolution
from app.schemas.goal_schemas import GoalCreate, GoalProgressUpdate, GoalRecord
from app.storage.base import RecordStore

router = APIRouter(prefix="/goals", tags=["Goals"])


@router.get("", response_model=List[GoalRecord], summary="List Goals")
async def list_goals(
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    return await GoalController.list_goals(store, identity.identity_id)


@router.post("", response_model=GoalRecord, summary="Create Goal")
async def create_goal(
    goal_data: GoalCreate,
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    """New goals start with ``current`` at 0."""
    return await GoalController.create_goal(store, identity.identity_id, goal_data)


@router.patch("/{goal_id}", response_model=GoalRecord, summary="Update Goal Progress")
async def update_goal_progress(
    goal_id: str,
    progress: GoalProgressUpdate,
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    return await GoalController.update_progress(store, identity.identity_id, goal_id, progress)
