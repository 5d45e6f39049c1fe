"""Core app configuration and database."""

from journalup.core.config import get_settings, settings
from journalup.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
