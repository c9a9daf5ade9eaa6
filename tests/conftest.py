from __future__ import annotations

import os
import tempfile

# Settings are read at import time
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="fittrack-logs-"))
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("ENVIRONMENT", "development")

from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.schemas.goal_schemas import GoalCreate
from app.schemas.workout_schemas import WorkoutCreate
from app.services.identity_service import IdentityService
from app.services.session_service import SessionService
from app.storage import DatabaseRecordStore, MemoryRecordStore

DEMO_PASSWORD = "demo-password"


@pytest.fixture()
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture()
def demo_store() -> MemoryRecordStore:
    return MemoryRecordStore(seed_demo_data=True, demo_password=DEMO_PASSWORD)


@pytest.fixture()
def session_service(store: MemoryRecordStore) -> SessionService:
    return SessionService(store)


@pytest.fixture()
def identity_service(store: MemoryRecordStore) -> IdentityService:
    return IdentityService(store)


@pytest.fixture()
async def db_store(tmp_path: Path) -> AsyncIterator[DatabaseRecordStore]:
    record_store = DatabaseRecordStore(f"sqlite+aiosqlite:///{tmp_path / 'fittrack.db'}")
    await record_store.initialize()
    yield record_store
    await record_store.close()


@pytest.fixture()
def client(store: MemoryRecordStore) -> Iterator[TestClient]:
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture()
def run_workout() -> WorkoutCreate:
    return WorkoutCreate(
        exercise_type="Running",
        duration=30,
        calories=240,
        intensity="medium",
        notes="Morning jog in the park",
        date=datetime(2026, 3, 3, 7, 30),
    )


@pytest.fixture()
def yoga_workout() -> WorkoutCreate:
    return WorkoutCreate(
        exercise_type="Yoga",
        duration=45,
        calories=135,
        intensity="low",
        date=datetime(2026, 3, 5, 19, 0),
    )


@pytest.fixture()
def calorie_goal() -> GoalCreate:
    return GoalCreate(type="daily_calories", target=500)


@pytest.fixture()
def workouts_goal() -> GoalCreate:
    return GoalCreate(type="weekly_workouts", target=5)
