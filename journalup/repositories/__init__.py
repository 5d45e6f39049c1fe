"""Repositories: one class per table, each bound to a request-scoped DB session."""

from journalup.repositories.journals import JournalRepository
from journalup.repositories.metrics import MetricsRepository
from journalup.repositories.sessions import SessionRepository
from journalup.repositories.settings import SettingsRepository
from journalup.repositories.user_info import UserInfoRepository
from journalup.repositories.users import UserRepository

__all__ = [
    "JournalRepository",
    "MetricsRepository",
    "SessionRepository",
    "SettingsRepository",
    "UserInfoRepository",
    "UserRepository",
]
