"""SQLAlchemy ORM models."""

from journalup.models.base import Base
from journalup.models.journal import Entry, Journal
from journalup.models.metric import Metric
from journalup.models.session import UserSession
from journalup.models.settings import UserSettings
from journalup.models.user import User
from journalup.models.user_info import UserInfo

__all__ = [
    "Base",
    "Entry",
    "Journal",
    "Metric",
    "User",
    "UserInfo",
    "UserSession",
    "UserSettings",
]
