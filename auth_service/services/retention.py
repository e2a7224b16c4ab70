"""Data retention: physically remove rows soft-deleted more than RETENTION_HOURS ago."""

import logging
from datetime import datetime, timezone, timedelta
from typing import TYPE_CHECKING

from auth_service.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from auth_service.core.config import Settings

logger = logging.getLogger(__name__)

# Children before parents, so each table's own count reflects only its own expired rows.
PURGE_ORDER = (
    "account_claim_actions",
    "claim_actions",
    "application_claims",
    "accounts",
    "claims",
    "actions",
    "applications",
)


def purge_soft_deleted(uow: UnitOfWork, settings: "Settings") -> dict[str, int]:
    """
    Delete rows whose dt_deleted is older than RETENTION_HOURS, table by table.

    Dependents not yet expired go with their parent through ON DELETE CASCADE.
    Returns rows deleted per repository name. Idempotent: safe to run repeatedly.
    """
    if not settings.RETENTION_ENABLED:
        logger.info("Retention is disabled (RETENTION_ENABLED=false); skipping.")
        return {name: 0 for name in PURGE_ORDER}

    cutoff = datetime.now(timezone.utc) - timedelta(hours=settings.RETENTION_HOURS)

    def _purge() -> dict[str, int]:
        return {name: getattr(uow, name).purge_deleted_before(cutoff) for name in PURGE_ORDER}

    deleted = uow.execute_in_transaction(_purge)

    if any(deleted.values()):
        logger.info(
            "Retention run: cutoff=%s, deleted=%s",
            cutoff.isoformat(),
            deleted,
        )
    return deleted
