"""Settings, database session handling, and security primitives."""

from app.core.config import get_settings, settings
from app.core.database import SessionLocal, dispose_engine, get_db

__all__ = ["SessionLocal", "dispose_engine", "get_db", "get_settings", "settings"]
