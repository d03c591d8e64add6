"""User account endpoints: signup, login, and RBAC-protected profile management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_optional_user, require_admin
from app.core.database import get_db
from app.core.messages import message
from app.core.security import TokenIssuer, get_token_issuer
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
from app.services import accounts

router = APIRouter()


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    requester: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> SignupResponse:
    """
    Create an account and return a token for it.

    Creating an admin requires the caller to send an admin's token as
    Authorization: Bearer <token>; anything else is rejected with 403.
    """
    _, token = accounts.signup(db, body, requester, issuer)
    return SignupResponse(message=message("USER_CREATED"), token=token)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns sessionData with a JWT and user summary.
    Include the token in the Authorization header as: Bearer <token>
    """
    user, token = accounts.login(db, body, issuer)
    return LoginResponse(
        session_data=SessionData(
            token=token,
            user=SessionUser(id=user.id, email=user.email, name=user.username, role=user.role),
        )
    )


@router.get("/", response_model=list[UserRead])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRead]:
    """List all users (admin only)."""
    return [UserRead.model_validate(u) for u in accounts.list_users(db)]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    return UserRead.model_validate(accounts.get_user(db, user_id))


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    body: UserUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    """Update a profile. Users edit themselves; only admins edit others or change roles."""
    return UserRead.model_validate(accounts.update_user(db, user_id, body, current_user))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    accounts.delete_user(db, user_id, current_user)
    return MessageResponse(message=message("USER_DELETED"))
