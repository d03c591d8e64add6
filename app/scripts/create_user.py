"""
Create a user directly in the database (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.roles import Role
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    hash_password,
)
from app.models.user import User
from app.services.accounts import get_user_by_email, normalize_email

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a user account without going through signup.")
    parser.add_argument("username", help=f"Display name (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Login email (must be unique)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=Role.USER.value, choices=[r.value for r in Role])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    args = build_parser().parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    email = normalize_email(args.email)
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        if get_user_by_email(db, email) is not None:
            print(f"A user with email '{email}' already exists.", file=sys.stderr)
            return 1
        role = Role(args.role)
        user = User(
            username=username,
            email=email,
            password_hash=hash_password(args.password),
            role=role,
        )
        db.add(user)
        db.commit()
        logger.info("Created user", extra={"user_id": user.id, "role": role.value})
        print(f"Created user '{username}' <{email}> with role '{role.value}'.")
        return 0
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Could not create user: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
