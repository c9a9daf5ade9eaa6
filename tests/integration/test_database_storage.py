from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from app.exceptions.errors import DuplicateRecordError
from app.schemas.goal_schemas import GoalCreate
from app.schemas.identity_schemas import IdentityCreate
from app.schemas.workout_schemas import WorkoutCreate
from app.services.identity_service import IdentityService
from app.services.session_service import SessionService
from app.storage import DatabaseRecordStore
from app.storage.base import DEFAULT_EXERCISES


async def test_catalog_seeded_once(db_store: DatabaseRecordStore) -> None:
    await db_store.initialize()

    catalog = await db_store.get_exercises()

    assert len(catalog) == len(DEFAULT_EXERCISES)


async def test_user_lookup_and_uniqueness(db_store: DatabaseRecordStore) -> None:
    created = await db_store.create_user(IdentityCreate(username="alice", password_hash="h"))

    assert (await db_store.get_user(created.id)).username == "alice"
    assert (await db_store.get_user_by_username("alice")).id == created.id
    assert await db_store.get_user("missing") is None

    with pytest.raises(DuplicateRecordError):
        await db_store.create_user(IdentityCreate(username="alice", password_hash="h2"))


async def test_workout_round_trip_and_update(
    db_store: DatabaseRecordStore, run_workout: WorkoutCreate
) -> None:
    owner = await db_store.create_user(IdentityCreate(username="bob", password_hash="h"))

    created = await db_store.create_workout(owner.id, run_workout)
    fetched = await db_store.get_workouts(owner.id)

    assert fetched == [created]
    assert created.notes == "Morning jog in the park"
    assert created.date == run_workout.date

    updated = await db_store.update_workout(created.id, {"calories": 260, "user_id": "other"})
    assert updated.calories == 260
    assert updated.user_id == owner.id
    assert await db_store.update_workout("missing", {"calories": 1}) is None


async def test_rejected_workout_update_is_not_persisted(
    db_store: DatabaseRecordStore, run_workout: WorkoutCreate
) -> None:
    owner = await db_store.create_user(IdentityCreate(username="bea", password_hash="h"))
    created = await db_store.create_workout(owner.id, run_workout)

    with pytest.raises(ValidationError):
        await db_store.update_workout(created.id, {"intensity": "extreme"})

    updated = await db_store.update_workout(created.id, {"duration": None, "intensity": "high"})

    assert updated.duration == created.duration
    assert updated.intensity.value == "high"
    assert await db_store.get_workouts(owner.id) == [updated]


async def test_date_range_boundaries(db_store: DatabaseRecordStore) -> None:
    owner = await db_store.create_user(IdentityCreate(username="carol", password_hash="h"))
    last_moment = datetime(2026, 3, 8, 23, 59, 59, 999000)
    for date in (last_moment, last_moment + timedelta(milliseconds=1), datetime(2026, 3, 2)):
        await db_store.create_workout(owner.id, WorkoutCreate(
            exercise_type="Walking", duration=30, calories=120, intensity="low", date=date
        ))

    in_range = await db_store.get_workouts_by_date_range(
        owner.id, datetime(2026, 3, 2), datetime(2026, 3, 8)
    )

    assert sorted(w.date for w in in_range) == [datetime(2026, 3, 2), last_moment]


async def test_goal_progress(db_store: DatabaseRecordStore, calorie_goal: GoalCreate) -> None:
    owner = await db_store.create_user(IdentityCreate(username="dave", password_hash="h"))

    goal = await db_store.create_goal(owner.id, calorie_goal)
    assert goal.current == 0

    updated = await db_store.update_goal(goal.id, 150)
    assert updated.current == 150
    assert await db_store.update_goal("missing", 1) is None


async def test_guest_promotion_against_relational_store(
    db_store: DatabaseRecordStore,
    run_workout: WorkoutCreate,
    calorie_goal: GoalCreate,
) -> None:
    session: dict = {}
    resolution = await SessionService(db_store).ensure_identity(session)
    guest_id = resolution.identity_id
    await db_store.create_workout(guest_id, run_workout)
    goal = await db_store.create_goal(guest_id, calorie_goal)
    await db_store.update_goal(goal.id, 410)

    user = await IdentityService(db_store).register(guest_id, "erin", "pass-word")

    workouts = await db_store.get_workouts(user.id)
    goals = await db_store.get_goals(user.id)
    assert [(w.exercise_type, w.date) for w in workouts] == [("Running", run_workout.date)]
    assert [(g.type.value, g.target, g.current) for g in goals] == [("daily_calories", 500, 410)]
    assert len(await db_store.get_workouts(guest_id)) == 1
