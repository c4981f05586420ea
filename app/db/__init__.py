"""Core application modules."""

from app.db.database import Database, engine_options

__all__ = ["Database", "engine_options"]
