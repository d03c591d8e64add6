"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.users import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SessionData,
    SessionUser,
    SignupRequest,
    SignupResponse,
    UserRead,
    UserUpdate,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "SessionData",
    "SessionUser",
    "SignupRequest",
    "SignupResponse",
    "UserRead",
    "UserUpdate",
]
