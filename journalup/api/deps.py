"""Request-scoped service construction for route handlers (FastAPI dependency injection)."""

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from journalup.core.config import get_settings
from journalup.core.database import get_db
from journalup.repositories import (
    JournalRepository,
    MetricsRepository,
    SessionRepository,
    SettingsRepository,
    UserInfoRepository,
    UserRepository,
)
from journalup.services.auth import AuthService
from journalup.services.journals import JournalService
from journalup.services.memory import MemoryGraphClient, get_memory_client
from journalup.services.metrics import MetricsService
from journalup.services.narrative import NarrativeClient, get_narrative_client
from journalup.services.settings import SettingsService
from journalup.services.user_info import UserInfoService

DbDep = Annotated[Session, Depends(get_db)]
NarrativeDep = Annotated[NarrativeClient | None, Depends(get_narrative_client)]
MemoryDep = Annotated[MemoryGraphClient | None, Depends(get_memory_client)]


def get_auth_service(db: DbDep) -> AuthService:
    ttl = timedelta(days=get_settings().SESSION_EXPIRE_DAYS)
    return AuthService(UserRepository(db), SessionRepository(db, ttl))


def get_metrics_service(db: DbDep, narrative: NarrativeDep) -> MetricsService:
    return MetricsService(MetricsRepository(db), narrative)


def get_journal_service(db: DbDep, memory: MemoryDep) -> JournalService:
    return JournalService(JournalRepository(db), memory)


def get_settings_service(db: DbDep) -> SettingsService:
    return SettingsService(SettingsRepository(db))


def get_user_info_service(db: DbDep) -> UserInfoService:
    return UserInfoService(UserInfoRepository(db))


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
MetricsServiceDep = Annotated[MetricsService, Depends(get_metrics_service)]
JournalServiceDep = Annotated[JournalService, Depends(get_journal_service)]
SettingsServiceDep = Annotated[SettingsService, Depends(get_settings_service)]
UserInfoServiceDep = Annotated[UserInfoService, Depends(get_user_info_service)]
