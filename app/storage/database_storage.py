"""
Relational record store on SQLAlchemy's async ORM.

Each call opens its own session and commits before returning, so every
write is atomic on its own and nothing spans calls.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.future import select

from app.core.logger import get_logger
from app.database import Base, async_session, build_engine, build_session_factory
from app.exceptions.errors import DuplicateRecordError, RecordStoreError
from app.models import Exercise, Goal, User, Workout
from app.schemas.identity_schemas import IdentityCreate, IdentityRecord
from app.schemas.workout_schemas import WorkoutCreate, WorkoutRecord
from app.schemas.goal_schemas import GoalCreate, GoalRecord
from app.schemas.exercise_schemas import ExerciseCreate, ExerciseRecord
from app.storage.base import DEFAULT_EXERCISES, RecordStore, validate_workout_updates
from app.utils.date_ranges import day_bounds, to_naive_utc

logger = get_logger("database_storage")


class DatabaseRecordStore(RecordStore):
    """Record store backed by Postgres (asyncpg) or SQLite (aiosqlite)."""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[AsyncEngine] = None):
        self.engine = engine or build_engine(database_url)
        self.session_factory = build_session_factory(self.engine)

    async def initialize(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Record store tables ensured.")
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Failed to create tables: {e}") from e
        await self._seed_exercises()

    async def close(self) -> None:
        await self.engine.dispose()

    async def _seed_exercises(self) -> None:
        """Seed the catalog once; an existing catalog is left untouched."""
        try:
            async with async_session(self.session_factory) as db:
                result = await db.execute(select(func.count(Exercise.id)))
                if result.scalar():
                    return
                for exercise in DEFAULT_EXERCISES:
                    db.add(Exercise(**exercise.dict()))
                await db.commit()
            logger.info("✅ Default exercises seeded to database")
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to seed exercises: {e}")
            raise RecordStoreError(str(e)) from e

    # Identities
    async def get_user(self, user_id: str) -> Optional[IdentityRecord]:
        try:
            async with async_session(self.session_factory) as db:
                user = await db.get(User, user_id)
                return IdentityRecord.model_validate(user) if user else None
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def get_user_by_username(self, username: str) -> Optional[IdentityRecord]:
        try:
            async with async_session(self.session_factory) as db:
                result = await db.execute(select(User).where(User.username == username))
                user = result.scalar_one_or_none()
                return IdentityRecord.model_validate(user) if user else None
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def create_user(self, data: IdentityCreate) -> IdentityRecord:
        values = data.dict(exclude_none=True)
        try:
            async with async_session(self.session_factory) as db:
                user = User(**values)
                db.add(user)
                await db.commit()
                await db.refresh(user)
                return IdentityRecord.model_validate(user)
        except IntegrityError as e:
            raise DuplicateRecordError(f"User already exists: {data.id or data.username}") from e
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    # Workouts
    async def get_workouts(self, user_id: str) -> List[WorkoutRecord]:
        try:
            async with async_session(self.session_factory) as db:
                result = await db.execute(
                    select(Workout)
                    .where(Workout.user_id == user_id)
                    .order_by(Workout.date.desc())
                )
                return [WorkoutRecord.model_validate(w) for w in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def create_workout(self, user_id: str, data: WorkoutCreate) -> WorkoutRecord:
        try:
            async with async_session(self.session_factory) as db:
                workout = Workout(
                    user_id=user_id,
                    exercise_type=data.exercise_type,
                    duration=data.duration,
                    calories=data.calories,
                    intensity=data.intensity.value,
                    notes=data.notes or None,
                    date=to_naive_utc(data.date) if data.date else datetime.utcnow(),
                )
                db.add(workout)
                await db.commit()
                await db.refresh(workout)
                return WorkoutRecord.model_validate(workout)
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def update_workout(self, workout_id: str, updates: Dict[str, Any]) -> Optional[WorkoutRecord]:
        changes = validate_workout_updates(updates)
        try:
            async with async_session(self.session_factory) as db:
                workout = await db.get(Workout, workout_id)
                if not workout:
                    return None
                for field, value in changes.items():
                    setattr(workout, field, value)
                await db.commit()
                await db.refresh(workout)
                return WorkoutRecord.model_validate(workout)
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def get_workouts_by_date_range(
        self, user_id: str, start_date: datetime, end_date: datetime
    ) -> List[WorkoutRecord]:
        start, end = day_bounds(to_naive_utc(start_date), to_naive_utc(end_date))
        try:
            async with async_session(self.session_factory) as db:
                result = await db.execute(
                    select(Workout)
                    .where(Workout.user_id == user_id)
                    .where(Workout.date >= start)
                    .where(Workout.date <= end)
                )
                return [WorkoutRecord.model_validate(w) for w in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    # Exercises
    async def get_exercises(self) -> List[ExerciseRecord]:
        try:
            async with async_session(self.session_factory) as db:
                result = await db.execute(select(Exercise))
                return [ExerciseRecord.model_validate(e) for e in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def create_exercise(self, data: ExerciseCreate) -> ExerciseRecord:
        try:
            async with async_session(self.session_factory) as db:
                exercise = Exercise(**data.dict())
                db.add(exercise)
                await db.commit()
                await db.refresh(exercise)
                return ExerciseRecord.model_validate(exercise)
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    # Goals
    async def get_goals(self, user_id: str) -> List[GoalRecord]:
        try:
            async with async_session(self.session_factory) as db:
                result = await db.execute(select(Goal).where(Goal.user_id == user_id))
                return [GoalRecord.model_validate(g) for g in result.scalars().all()]
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def create_goal(self, user_id: str, data: GoalCreate) -> GoalRecord:
        try:
            async with async_session(self.session_factory) as db:
                goal = Goal(
                    user_id=user_id,
                    type=data.type.value,
                    target=data.target,
                    current=0,
                    date=datetime.utcnow(),
                )
                db.add(goal)
                await db.commit()
                await db.refresh(goal)
                return GoalRecord.model_validate(goal)
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e

    async def update_goal(self, goal_id: str, current: float) -> Optional[GoalRecord]:
        try:
            async with async_session(self.session_factory) as db:
                goal = await db.get(Goal, goal_id)
                if not goal:
                    return None
                goal.current = current
                await db.commit()
                await db.refresh(goal)
                return GoalRecord.model_validate(goal)
        except SQLAlchemyError as e:
            raise RecordStoreError(str(e)) from e
