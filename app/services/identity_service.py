"""
Identity Service
Guest-to-registered promotion and username/password login.
"""

from typing import Optional

from app.core.logger import get_logger
from app.exceptions.errors import (
    DuplicateRecordError,
    InvalidCredentialsError,
    PersistenceFailure,
    RecordStoreError,
    UsernameTakenError,
)
from app.schemas.identity_schemas import IdentityCreate, IdentityRecord
from app.schemas.workout_schemas import WorkoutCreate, WorkoutRecord
from app.schemas.goal_schemas import GoalCreate, GoalRecord
from app.services.password_service import hash_password, verify_password
from app.storage.base import RecordStore

logger = get_logger("identity_service")


class IdentityService:
    """Registers and authenticates identities against a record store."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def register(
        self, guest_id: Optional[str], username: str, password: str
    ) -> IdentityRecord:
        """Create a registered identity and copy the guest's workouts and goals to it.

        The registered identity always gets a fresh id. Guest records are
        copied, not moved, and stay behind under the guest id. There is no
        rollback: if copying fails part way, the records copied so far remain
        and ``PersistenceFailure`` reports how far the migration got.
        """
        try:
            existing = await self.store.get_user_by_username(username)
        except RecordStoreError as e:
            logger.error(f"Username lookup failed during registration: {e}")
            raise PersistenceFailure("Registration failed") from e

        if existing:
            logger.info(f"Registration rejected, username taken: {username}")
            raise UsernameTakenError(username)

        try:
            user = await self.store.create_user(IdentityCreate(
                username=username,
                password_hash=hash_password(password),
                is_guest=False,
            ))
        except DuplicateRecordError as e:
            # Lost a race with a concurrent registration for the same name
            raise UsernameTakenError(username) from e
        except RecordStoreError as e:
            logger.error(f"Failed to create registered identity: {e}")
            raise PersistenceFailure("Registration failed") from e

        if guest_id:
            await self._migrate_guest_records(guest_id, user.id)

        logger.info(f"Registered identity {user.id} ({username}) from {guest_id or 'no guest session'}")
        return user

    async def _migrate_guest_records(self, guest_id: str, user_id: str) -> None:
        migrated_workouts = 0
        migrated_goals = 0
        try:
            workouts = await self.store.get_workouts(guest_id)
            goals = await self.store.get_goals(guest_id)

            for workout in workouts:
                await self._copy_workout(workout, user_id)
                migrated_workouts += 1

            for goal in goals:
                await self._copy_goal(goal, user_id)
                migrated_goals += 1
        except RecordStoreError as e:
            logger.error(
                f"Guest migration {guest_id} -> {user_id} stopped after "
                f"{migrated_workouts} workouts and {migrated_goals} goals: {e}"
            )
            raise PersistenceFailure(
                "Registration failed",
                identity_id=user_id,
                migrated_workouts=migrated_workouts,
                migrated_goals=migrated_goals,
            ) from e

        logger.info(
            f"Migrated {migrated_workouts} workouts and {migrated_goals} goals "
            f"from {guest_id} to {user_id}"
        )

    async def _copy_workout(self, workout: WorkoutRecord, user_id: str) -> WorkoutRecord:
        return await self.store.create_workout(user_id, WorkoutCreate(
            exercise_type=workout.exercise_type,
            duration=workout.duration,
            calories=workout.calories,
            intensity=workout.intensity,
            notes=workout.notes,
            date=workout.date,
        ))

    async def _copy_goal(self, goal: GoalRecord, user_id: str) -> GoalRecord:
        new_goal = await self.store.create_goal(user_id, GoalCreate(type=goal.type, target=goal.target))
        # create_goal resets current to 0
        restored = await self.store.update_goal(new_goal.id, goal.current)
        if restored is None:
            raise RecordStoreError(f"Goal {new_goal.id} vanished before progress was restored")
        return restored

    async def login(self, username: str, password: str) -> IdentityRecord:
        """Return the registered identity for valid credentials.

        Unknown usernames, guest identities and wrong passwords all raise the
        same ``InvalidCredentialsError``.
        """
        try:
            user = await self.store.get_user_by_username(username)
        except RecordStoreError as e:
            logger.error(f"Username lookup failed during login: {e}")
            raise PersistenceFailure("Login failed") from e

        if user is None or user.is_guest or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for username: {username}")
            raise InvalidCredentialsError()

        logger.info(f"Login successful for {user.id}")
        return user
