"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Enum, Integer, String, func

from app.core.roles import Role
from app.models.base import Base


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    email is the login key and is unique; password_hash is never serialized.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(Role, name="user_role", values_callable=lambda e: [r.value for r in e]),
        nullable=False,
        default=Role.USER,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
