"""
Auth Routes
"""
from fastapi import APIRouter, Depends, Request

from app.middlewares.session_identity import get_current_identity, get_record_store
from app.api.v1.controllers.auth_controller import AuthController
from app.schemas.identity_schemas import (
    AuthResponse, CredentialsRequest, MessageResponse,
    SessionResolution, SessionStatusResponse
)
from app.storage.base import RecordStore

router = APIRouter(tags=["Auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    summary="Register",
    description="Turn the current guest session into a registered account, carrying its workouts and goals over."
)
async def register(
    request: Request,
    body: CredentialsRequest,
    identity: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    return await AuthController.register(request, body, identity, store)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login",
    description="Log in with username and password."
)
async def login(
    request: Request,
    body: CredentialsRequest,
    _: SessionResolution = Depends(get_current_identity),
    store: RecordStore = Depends(get_record_store)
):
    return await AuthController.login(request, body, store)


@router.post("/logout", response_model=MessageResponse, summary="Logout")
async def logout(request: Request):
    return await AuthController.logout(request)


@router.get(
    "/auth/user",
    response_model=SessionStatusResponse,
    summary="Current Identity",
    description="Identity attached to this session. A guest is created on first contact."
)
async def current_identity(identity: SessionResolution = Depends(get_current_identity)):
    return await AuthController.session_status(identity)
