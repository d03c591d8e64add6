"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any, Protocol

import bcrypt
import jwt

from app.core.config import Settings, get_settings
from app.core.roles import Role

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    cost = rounds if rounds is not None else get_settings().BCRYPT_ROUNDS
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=cost)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class InvalidTokenError(Exception):
    """Token is missing claims, expired, or fails signature verification."""


@dataclass(frozen=True)
class TokenIdentity:
    """Who a token speaks for."""

    user_id: int
    role: Role


class TokenIssuer(Protocol):
    def issue(self, identity: TokenIdentity) -> str: ...

    def verify(self, token: str) -> TokenIdentity: ...


class JWTTokenIssuer:
    """Signs identities as JWTs with sub (user id), role, iat and exp claims."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    def issue(self, identity: TokenIdentity) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(identity.user_id),
            "role": identity.role.value,
            "iat": now,
            "exp": now + self._expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenIdentity:
        """
        Decode and validate the token; return the identity it carries.
        Raises InvalidTokenError on a bad signature, expiry, or malformed claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError(str(e)) from e
        try:
            return TokenIdentity(user_id=int(payload["sub"]), role=Role(payload.get("role")))
        except (TypeError, ValueError) as e:
            raise InvalidTokenError("Invalid token payload") from e


def build_token_issuer(settings: Settings) -> TokenIssuer:
    return JWTTokenIssuer(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Dependency: the process-wide token issuer built from settings."""
    return build_token_issuer(get_settings())
