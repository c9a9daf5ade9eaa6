"""
Auth Controller
"""
from fastapi import Request, status

from app.exceptions.errors import ApplicationException
from app.schemas.identity_schemas import (
    AuthResponse, AuthUserResponse, CredentialsRequest,
    MessageResponse, SessionResolution, SessionStatusResponse
)
from app.services.identity_service import IdentityService
from app.services.session_service import SESSION_GUEST_KEY, SESSION_IDENTITY_KEY
from app.storage.base import RecordStore
from app.core.logger import get_logger

logger = get_logger("auth_controller")


def _require_credentials(body: CredentialsRequest) -> None:
    if not body.username or not body.password:
        raise ApplicationException(
            "Username and password are required",
            status.HTTP_400_BAD_REQUEST
        )


class AuthController:
    """Controller for registration, login and session status."""

    @staticmethod
    async def register(
        request: Request,
        body: CredentialsRequest,
        identity: SessionResolution,
        store: RecordStore
    ) -> AuthResponse:
        _require_credentials(body)

        # Only a guest session has records to carry over
        guest_id = identity.identity_id if identity.is_guest else None
        user = await IdentityService(store).register(guest_id, body.username, body.password)

        request.session[SESSION_IDENTITY_KEY] = user.id
        request.session[SESSION_GUEST_KEY] = False

        return AuthResponse(
            message="Registration successful",
            user=AuthUserResponse(id=user.id, username=user.username)
        )

    @staticmethod
    async def login(
        request: Request,
        body: CredentialsRequest,
        store: RecordStore
    ) -> AuthResponse:
        _require_credentials(body)

        user = await IdentityService(store).login(body.username, body.password)

        request.session[SESSION_IDENTITY_KEY] = user.id
        request.session[SESSION_GUEST_KEY] = False

        return AuthResponse(
            message="Login successful",
            user=AuthUserResponse(id=user.id, username=user.username)
        )

    @staticmethod
    async def logout(request: Request) -> MessageResponse:
        identity_id = request.session.get(SESSION_IDENTITY_KEY)
        request.session.clear()
        logger.info(f"Session cleared for {identity_id}")
        return MessageResponse(message="Logout successful")

    @staticmethod
    async def session_status(identity: SessionResolution) -> SessionStatusResponse:
        return SessionStatusResponse(
            is_guest=identity.is_guest,
            user_id=identity.identity_id,
            username=identity.user.username if identity.user else None
        )
