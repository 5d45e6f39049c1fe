"""API v1 routes."""

from fastapi import APIRouter

from journalup.api.v1 import ai, auth, health, journals, metrics, settings, user_info

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(journals.router, prefix="/journals", tags=["journals"])
router.include_router(metrics.router, prefix="/metrics", tags=["metrics"])
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(user_info.router, prefix="/user-info", tags=["user-info"])
router.include_router(ai.router, prefix="/ai", tags=["ai"])
