"""
CLI entrypoint for the expired-session sweep. Run from cron, e.g.:

  python -m journalup.retention

Or hourly: 0 * * * * cd /path/to/journalup && .venv/bin/python -m journalup.retention
"""

import logging
import sys

from journalup.core.config import get_settings
from journalup.core.database import SessionLocal
from journalup.services.retention import run_session_sweep

logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run the sweep: delete sessions past their expires_at."""
    settings = get_settings()
    db = SessionLocal()
    try:
        sessions_deleted = run_session_sweep(db, settings)
        logger.info("Session sweep completed: sessions_deleted=%s", sessions_deleted)
        return 0
    except Exception as e:
        logger.exception("Session sweep failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
