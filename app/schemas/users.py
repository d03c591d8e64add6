"""Request/response schemas for the user account endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.roles import Role
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)


class SignupRequest(BaseModel):
    """New account. role defaults to user; admin requires an admin caller."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: EmailStr
    # Lengths are checked in the service, after the mismatch check.
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")
    role: Role | None = None


class SignupResponse(BaseModel):
    message: str
    token: str = Field(..., description="JWT access token")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class SessionUser(BaseModel):
    """User summary returned on login (no password)."""

    id: int
    email: str
    name: str
    role: Role


class SessionData(BaseModel):
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: SessionUser


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_data: SessionData = Field(..., alias="sessionData")


class UserRead(BaseModel):
    """Public view of a user account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserUpdate(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    username: str | None = Field(default=None, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role | None = None


class CurrentUser(BaseModel):
    """Authenticated user (id, username, email, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: Role


class MessageResponse(BaseModel):
    message: str
