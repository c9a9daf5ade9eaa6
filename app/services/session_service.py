"""
Session Resolver
Attaches a guest or registered identity to every request session.
"""

import uuid
from typing import Any, Mapping, MutableMapping, Optional

from app.core.logger import get_logger
from app.exceptions.errors import DuplicateRecordError, PersistenceFailure, RecordStoreError
from app.schemas.identity_schemas import IdentityCreate, IdentityRecord, SessionResolution
from app.storage.base import RecordStore

logger = get_logger("session_service")

SESSION_IDENTITY_KEY = "identity_id"
SESSION_GUEST_KEY = "is_guest"

GUEST_ID_PREFIX = "guest_"
# Guests cannot log in; this never matches a bcrypt hash
GUEST_PASSWORD_PLACEHOLDER = "guest_password"


def generate_guest_id() -> str:
    return f"{GUEST_ID_PREFIX}{uuid.uuid4()}"


def guest_username(guest_id: str) -> str:
    """Short username derived from the guest id, e.g. ``guest_1a2b3c4d``."""
    token = guest_id[len(GUEST_ID_PREFIX):] if guest_id.startswith(GUEST_ID_PREFIX) else guest_id
    return f"{GUEST_ID_PREFIX}{token[:8]}"


def apply_session_patch(session: MutableMapping[str, Any], patch: Mapping[str, Any]) -> None:
    for key, value in patch.items():
        session[key] = value


class SessionService:
    """Resolves the identity behind a session, minting guests on first contact."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def ensure_identity(self, session_state: Mapping[str, Any]) -> SessionResolution:
        identity_id: Optional[str] = session_state.get(SESSION_IDENTITY_KEY)
        is_guest = bool(session_state.get(SESSION_GUEST_KEY, True))

        if not identity_id:
            return await self._start_guest_session()

        if is_guest:
            return SessionResolution(identity_id=identity_id, is_guest=True)

        user = await self._get_user(identity_id)
        if user is None:
            logger.info(f"Registered identity {identity_id} no longer exists, starting guest session")
            return await self._start_guest_session()

        # The stored row decides the kind, not the cookie flag
        session_patch = {SESSION_GUEST_KEY: True} if user.is_guest else {}
        return SessionResolution(
            identity_id=identity_id,
            is_guest=user.is_guest,
            user=user,
            session_patch=session_patch,
        )

    async def _start_guest_session(self) -> SessionResolution:
        guest_id = generate_guest_id()
        await self._create_guest(guest_id)
        return SessionResolution(
            identity_id=guest_id,
            is_guest=True,
            session_patch={SESSION_IDENTITY_KEY: guest_id, SESSION_GUEST_KEY: True},
        )

    async def _create_guest(self, guest_id: str) -> None:
        try:
            await self.store.create_user(IdentityCreate(
                id=guest_id,
                username=guest_username(guest_id),
                password_hash=GUEST_PASSWORD_PLACEHOLDER,
                is_guest=True,
            ))
            logger.info(f"Created guest identity {guest_id}")
        except DuplicateRecordError as e:
            # Fine if another request created the same guest first
            if await self._get_user(guest_id) is None:
                logger.error(f"Guest identity {guest_id} clashed with an existing record: {e}")
                raise PersistenceFailure("Failed to create guest identity") from e
            logger.debug(f"Guest identity {guest_id} already exists")
        except RecordStoreError as e:
            logger.error(f"Failed to create guest identity {guest_id}: {e}")
            raise PersistenceFailure("Failed to create guest identity") from e

    async def _get_user(self, identity_id: str) -> Optional[IdentityRecord]:
        try:
            return await self.store.get_user(identity_id)
        except RecordStoreError as e:
            logger.error(f"Failed to load identity {identity_id}: {e}")
            raise PersistenceFailure("Failed to load identity") from e
