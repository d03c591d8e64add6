"""Auth dependencies: bearer-token authentication and role gates."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import InvalidTokenError, TokenIssuer, get_token_issuer
from app.schemas.users import CurrentUser
from app.services import accounts

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _resolve_user(token: str, db: Session, issuer: TokenIssuer) -> CurrentUser:
    try:
        identity = issuer.verify(token)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token", extra={"reason": str(e)[:200]})
        raise AuthenticationError("TOKEN_INVALID") from e
    user = accounts.get_user_by_id(db, identity.user_id)
    if user is None:
        raise AuthenticationError("USER_NOT_EXISTS")
    return CurrentUser.model_validate(user)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationError("NOT_AUTHENTICATED")
    current_user = _resolve_user(credentials.credentials, db, issuer)
    request.state.user = current_user
    return current_user


def get_optional_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentUser | None:
    """Dependency: the caller if a valid token is presented, else None (anonymous)."""
    if credentials is None:
        return None
    try:
        current_user = _resolve_user(credentials.credentials, db, issuer)
    except AuthenticationError:
        return None
    request.state.user = current_user
    return current_user


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with the admin role. Raises 403 for non-admin."""
    if not current_user.role.is_admin:
        raise AuthorizationError("ADMIN_REQUIRED")
    return current_user
