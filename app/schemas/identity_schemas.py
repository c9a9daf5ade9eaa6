from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime


class IdentityRecord(BaseModel):
    """Guest or registered identity as returned by the record store."""
    id: str
    username: Optional[str] = None
    password_hash: Optional[str] = None
    is_guest: bool = False
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class IdentityCreate(BaseModel):
    """Data for a new identity row. ``id`` is set for guests only."""
    id: Optional[str] = None
    username: Optional[str] = None
    password_hash: Optional[str] = None
    is_guest: bool = False


class CredentialsRequest(BaseModel):
    """Body of register and login requests. Blank values are rejected by the controller."""
    username: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, max_length=128)

    class Config:
        json_schema_extra = {
            "example": {
                "username": "runner42",
                "password": "correct horse battery staple"
            }
        }


class AuthUserResponse(BaseModel):
    id: str
    username: Optional[str] = None


class AuthResponse(BaseModel):
    message: str
    user: AuthUserResponse


class SessionStatusResponse(BaseModel):
    is_guest: bool
    user_id: str
    username: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class SessionResolution(BaseModel):
    """Identity resolved for one request plus the session changes to persist.

    ``session_patch`` is empty when the session already carried a valid
    identity; otherwise it holds the new ``identity_id``/``is_guest`` pair.
    """
    identity_id: str
    is_guest: bool
    user: Optional[IdentityRecord] = None
    session_patch: Dict[str, Any] = Field(default_factory=dict)
