from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse


class ApplicationException(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_response(self):
        return JSONResponse(
            status_code=self.status_code,
            content={"error": self.message}
        )


class UsernameTakenError(ApplicationException):
    def __init__(self, username: str):
        super().__init__("Username already exists", status.HTTP_400_BAD_REQUEST)
        self.username = username


class InvalidCredentialsError(ApplicationException):
    # Same message for unknown user and wrong password
    def __init__(self):
        super().__init__("Invalid username or password", status.HTTP_401_UNAUTHORIZED)


class NotFoundError(ApplicationException):
    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} not found", status.HTTP_404_NOT_FOUND)
        self.resource = resource
        self.resource_id = resource_id


class PersistenceFailure(ApplicationException):
    """The record store was unavailable or rejected a write.

    When raised mid-promotion, ``identity_id`` names the registered identity
    that was already created and the ``migrated_*`` counters tell how many
    guest records were re-homed before the failure. Nothing is rolled back.
    """

    def __init__(
        self,
        message: str = "Persistence failure",
        identity_id: Optional[str] = None,
        migrated_workouts: int = 0,
        migrated_goals: int = 0,
    ):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.identity_id = identity_id
        self.migrated_workouts = migrated_workouts
        self.migrated_goals = migrated_goals

    @property
    def partially_applied(self) -> bool:
        return self.identity_id is not None


class SessionError(ApplicationException):
    def __init__(self):
        super().__init__("Session error", status.HTTP_500_INTERNAL_SERVER_ERROR)


class RecordStoreError(Exception):
    """Raised by record store implementations on backend faults."""


class DuplicateRecordError(RecordStoreError):
    """A record with the same id or unique key already exists."""
