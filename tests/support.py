"""Shared helpers: fresh schema per test and seeded accounts with tokens."""

import unittest

from fastapi.testclient import TestClient

from app.core.database import SessionLocal, engine
from app.core.roles import Role
from app.core.security import TokenIdentity, get_token_issuer, hash_password
from app.main import app
from app.models import Base, User

DEFAULT_PASSWORD = "hashedPassword"


def create_user(
    username: str,
    email: str,
    password: str = DEFAULT_PASSWORD,
    role: Role = Role.USER,
) -> int:
    """Insert a user directly and return its id."""
    db = SessionLocal()
    try:
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(password),
            role=role,
        )
        db.add(user)
        db.commit()
        return user.id
    finally:
        db.close()


def token_for(user_id: int, role: Role) -> str:
    return get_token_issuer().issue(TokenIdentity(user_id=user_id, role=role))


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class DatabaseTestCase(unittest.TestCase):
    """Creates the schema before each test and drops it after."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        self.addCleanup(Base.metadata.drop_all, engine)


class ApiTestCase(DatabaseTestCase):
    """Database plus a TestClient and one admin and one regular user."""

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app)
        self.admin_id = create_user("adminUser", "admin@example.com", role=Role.ADMIN)
        self.user_id = create_user("regularUser", "user@example.com")
        self.admin_headers = bearer(token_for(self.admin_id, Role.ADMIN))
        self.user_headers = bearer(token_for(self.user_id, Role.USER))
