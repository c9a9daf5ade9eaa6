"""
Exercise Routes
Global catalog; no session identity needed.
"""
from typing import List

from fastapi import APIRouter, Depends

from app.middlewares.session_identity import get_record_store
from app.schemas.exercise_schemas import ExerciseCreate, ExerciseRecord
from app.storage.base import RecordStore
from app.core.logger import get_logger

logger = get_logger("exercise_routes")
router = APIRouter(prefix="/exercises", tags=["Exercises"])


@router.get("", response_model=List[ExerciseRecord], summary="List Exercises")
async def list_exercises(store: RecordStore = Depends(get_record_store)):
    return await store.get_exercises()


@router.post("", response_model=ExerciseRecord, summary="Add Exercise")
async def create_exercise(
    exercise_data: ExerciseCreate,
    store: RecordStore = Depends(get_record_store)
):
    exercise = await store.create_exercise(exercise_data)
    logger.info(f"Added exercise to catalog: {exercise.name}")
    return exercise
