from fastapi import Depends, Request

from app.core.logger import get_logger
from app.exceptions.errors import PersistenceFailure, SessionError
from app.schemas.identity_schemas import SessionResolution
from app.services.session_service import SessionService, apply_session_patch
from app.storage.base import RecordStore

logger = get_logger("session_identity")


def get_record_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the store created at startup."""
    return request.app.state.record_store


async def get_current_identity(
    request: Request,
    store: RecordStore = Depends(get_record_store)
) -> SessionResolution:
    """FastAPI dependency resolving the request's guest or registered identity.

    Writes a newly minted guest id back into the cookie session.
    """
    try:
        resolution = await SessionService(store).ensure_identity(request.session)
    except PersistenceFailure as e:
        logger.error(f"Session middleware error: {e.message}")
        raise SessionError() from e

    apply_session_patch(request.session, resolution.session_patch)
    return resolution
