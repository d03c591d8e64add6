"""Account rules: signup, login, and profile read/update/delete with role checks."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from app.core.roles import Role
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    TokenIdentity,
    TokenIssuer,
    hash_password,
    verify_password,
)
from app.models import User
from app.schemas.users import CurrentUser, LoginRequest, SignupRequest, UserUpdate

logger = logging.getLogger(__name__)

# Range of the users.id INTEGER column; ids outside it cannot exist.
MAX_USER_ID = 2**31 - 1


def normalize_email(email: str) -> str:
    return email.strip().lower()


@contextmanager
def _persistence_errors(db: Session, failure_code: str, action: str) -> Iterator[None]:
    """Roll back and mask unexpected database errors as InternalError(failure_code)."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error while %s", action)
        raise InternalError(failure_code) from e


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    if not (1 <= user_id <= MAX_USER_ID):
        return None
    return db.get(User, user_id)


def _email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
    query = db.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def signup(
    db: Session,
    body: SignupRequest,
    requester: CurrentUser | None,
    issuer: TokenIssuer,
) -> tuple[User, str]:
    """
    Register a new account and return it with a freshly issued token.

    Raises ValidationError on password mismatch or bad password length,
    AuthorizationError when a non-admin (or anonymous) caller asks for the
    admin role, ConflictError when the email is already registered.
    """
    if body.password != body.confirm_password:
        raise ValidationError("PASSWORDS_DO_NOT_MATCH")
    if not (PASSWORD_MIN_LEN <= len(body.password) <= PASSWORD_MAX_LEN):
        raise ValidationError("PASSWORD_LENGTH_INVALID")

    role = body.role or Role.USER
    actor_role = requester.role if requester is not None else Role.USER
    if not actor_role.can_assign(role):
        logger.warning(
            "Admin signup denied",
            extra={"requester_id": requester.id if requester else None},
        )
        raise AuthorizationError("ADMIN_CREATE_DENIED")

    email = normalize_email(body.email)
    with _persistence_errors(db, "USER_CREATE_FAILED", "creating user"):
        if _email_taken(db, email):
            raise ConflictError("EMAIL_IN_USE")
        user = User(
            username=body.username.strip(),
            email=email,
            password_hash=hash_password(body.password),
            role=role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            # Lost a race on the unique email index.
            db.rollback()
            raise ConflictError("EMAIL_IN_USE") from e
        db.refresh(user)

    logger.info("User created", extra={"user_id": user.id, "role": role.value})
    token = issuer.issue(TokenIdentity(user_id=user.id, role=role))
    return user, token


def login(db: Session, body: LoginRequest, issuer: TokenIssuer) -> tuple[User, str]:
    """Check credentials; return the user and a signed token."""
    with _persistence_errors(db, "USER_READ_FAILED", "looking up login email"):
        user = get_user_by_email(db, body.email)
    if user is None:
        logger.warning("Login for unknown email")
        raise NotFoundError("USER_NOT_EXISTS")
    if not verify_password(body.password, user.password_hash):
        logger.warning("Failed login attempt", extra={"user_id": user.id})
        raise AuthenticationError("PASSWORD_INVALID")

    logger.info("Successful login", extra={"user_id": user.id})
    return user, issuer.issue(TokenIdentity(user_id=user.id, role=Role(user.role)))


def list_users(db: Session) -> list[User]:
    """All accounts ordered by id. Callers gate this on the admin role."""
    with _persistence_errors(db, "USERS_READ_FAILED", "listing users"):
        return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    with _persistence_errors(db, "USER_READ_FAILED", "retrieving user"):
        user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("USER_NOT_EXISTS", details={"user_id": user_id})
    return user


def update_user(db: Session, user_id: int, body: UserUpdate, actor: CurrentUser) -> User:
    """
    Apply a partial profile update.

    Non-admins may only edit themselves and may not change a role. A new
    password is re-hashed; a new email must not belong to another account.
    """
    user = get_user(db, user_id)
    if not actor.role.can_manage(actor.id, user.id):
        raise AuthorizationError("PROFILE_UPDATE_DENIED")

    if body.role is not None and body.role != user.role:
        if not actor.role.can_assign(body.role):
            logger.warning(
                "Role change denied",
                extra={"actor_id": actor.id, "user_id": user.id, "requested_role": body.role.value},
            )
            raise AuthorizationError("ROLE_UPDATE_DENIED")

    with _persistence_errors(db, "USER_UPDATE_FAILED", "updating user"):
        if body.username is not None:
            user.username = body.username.strip()
        if body.email is not None:
            email = normalize_email(body.email)
            if email != user.email and _email_taken(db, email, exclude_id=user.id):
                raise ConflictError("EMAIL_IN_USE")
            user.email = email
        if body.password:
            user.password_hash = hash_password(body.password)
        if body.role is not None:
            user.role = body.role
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError("EMAIL_IN_USE") from e
        db.refresh(user)

    logger.info("User updated", extra={"user_id": user.id, "actor_id": actor.id})
    return user


def delete_user(db: Session, user_id: int, actor: CurrentUser) -> None:
    user = get_user(db, user_id)
    if not actor.role.can_manage(actor.id, user.id):
        raise AuthorizationError("PROFILE_DELETE_DENIED")
    with _persistence_errors(db, "USER_DELETE_FAILED", "deleting user"):
        db.delete(user)
        db.commit()
    logger.info("User deleted", extra={"user_id": user_id, "actor_id": actor.id})
