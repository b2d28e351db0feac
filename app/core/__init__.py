"""Core app configuration, database and security helpers."""

from app.core.config import APP_NAME, APP_VERSION, get_settings, settings
from app.core.database import SessionLocal, get_db

__all__ = ["APP_NAME", "APP_VERSION", "get_settings", "settings", "SessionLocal", "get_db"]
