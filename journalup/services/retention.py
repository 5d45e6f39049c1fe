"""Session sweep: delete sessions whose expires_at has passed."""

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from journalup.models.base import utcnow
from journalup.repositories.sessions import SessionRepository

if TYPE_CHECKING:
    from journalup.core.config import Settings

logger = logging.getLogger(__name__)


def run_session_sweep(
    db: Session,
    settings: "Settings",
    now: datetime | None = None,
) -> int:
    """
    Delete expired sessions and return how many were removed.

    Idempotent: safe to run repeatedly. Expired sessions are already rejected by
    the auth gate, so this only keeps the table small.
    """
    if not settings.SESSION_SWEEP_ENABLED:
        logger.info("Session sweep is disabled (SESSION_SWEEP_ENABLED=false); skipping.")
        return 0

    cutoff = now or utcnow()
    repository = SessionRepository(db, timedelta(days=settings.SESSION_EXPIRE_DAYS))
    deleted_count = repository.delete_expired(cutoff)

    if deleted_count > 0:
        logger.info(
            "Session sweep: cutoff=%s, sessions_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
