"""Test environment: in-memory SQLite and cheap bcrypt, set before the app is imported."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ["MESSAGES_LOCALE"] = "en"
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-users-api-suite")
