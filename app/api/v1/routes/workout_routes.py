"""
Workout Routes
"""
from typing import List

from fastapi import APIRouter, Depends

from app.middlewares.session_identity import get_current_identity, get_record_store
from app.api.v1.controllers.workout_controller import WorkoutController
from app.schemas.identity_schemas import SessionResolution
from app.schemas.workout_schemas import WorkoutCreate, WorkoutRecord, WorkoutUpdate
from app.storage.base import RecordStore

router = APIRouter(prefix="/workouts", tags=["Workouts"])


@router.get("", response_model=List[WorkoutRecord], summary="List Workouts")
async def list_workouts(
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    """All workouts of the current identity, newest first."""
    return await WorkoutController.list_workouts(store, identity.identity_id)


@router.post("", response_model=WorkoutRecord, summary="Log Workout")
async def create_workout(
    workout_data: WorkoutCreate,
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    return await WorkoutController.create_workout(store, identity.identity_id, workout_data)


@router.get("/weekly", response_model=List[WorkoutRecord], summary="This Week's Workouts")
async def weekly_workouts(
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    """Workouts dated Monday 00:00 through Sunday 23:59:59 of the current week (UTC)."""
    return await WorkoutController.weekly_workouts(store, identity.identity_id)


@router.patch("/{workout_id}", response_model=WorkoutRecord, summary="Update Workout")
async def update_workout(
    workout_id: str,
    updates: WorkoutUpdate,
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    return await WorkoutController.update_workout(store, identity.identity_id, workout_id, updates)
