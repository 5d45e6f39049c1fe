"""Liveness endpoint; no authentication."""

from fastapi import APIRouter

from journalup.api.deps import DbDep
from journalup.core.config import get_settings
from journalup.core.database import check_db_connected
from journalup.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: DbDep) -> HealthResponse:
    """Database reachability and which optional integrations are switched on."""
    settings = get_settings()
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        ai_enabled=settings.ai_enabled,
        memory_enabled=settings.memory_enabled,
    )
