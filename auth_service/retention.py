"""
CLI entrypoint for the data retention job. Run from cron, e.g.:

  python -m auth_service.retention

Or hourly: 0 * * * * cd /path/to/auth-service && .venv/bin/python -m auth_service.retention
"""

import logging
import sys

from auth_service.core.config import get_settings
from auth_service.core.database import SessionLocal
from auth_service.services.retention import purge_soft_deleted
from auth_service.unit_of_work import UnitOfWork

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run retention: purge rows soft-deleted more than RETENTION_HOURS ago."""
    settings = get_settings()
    with UnitOfWork(SessionLocal) as uow:
        try:
            deleted = purge_soft_deleted(uow, settings)
        except Exception as e:
            logger.exception("Retention job failed: %s", e)
            return 1
    logger.info("Retention completed: rows_deleted=%s", sum(deleted.values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
