"""Unit of work: one session and one transaction scope per logical operation."""

import logging
from collections.abc import Callable
from types import TracebackType
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from auth_service.core.errors import AuthServiceError, ConflictError, StorageError
from auth_service.repositories import (
    AccountClaimActionRepository,
    AccountRepository,
    ActionRepository,
    ApplicationClaimRepository,
    ApplicationRepository,
    ClaimActionRepository,
    ClaimRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATE for unique_violation.
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a unique constraint/index violation (PostgreSQL or SQLite)."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    message = str(orig)
    return "UNIQUE constraint failed" in message or "duplicate key value" in message


class UnitOfWork:
    """
    Owns one Session and exposes one repository per entity, all sharing it.

    Create one per request or command; use as a context manager so the session
    is closed (and any open transaction rolled back) whatever the outcome.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.session = session_factory()
        self.accounts = AccountRepository(self.session)
        self.claims = ClaimRepository(self.session)
        self.actions = ActionRepository(self.session)
        self.claim_actions = ClaimActionRepository(self.session)
        self.account_claim_actions = AccountClaimActionRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        self.application_claims = ApplicationClaimRepository(self.session)

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def execute_in_transaction(
        self,
        action: Callable[[], T],
        conflict_message: str = "A record with the same unique key already exists.",
    ) -> T:
        """
        Run action, commit on success; roll back and re-raise on any failure.

        Store errors are translated: unique violations and stale versions become
        ConflictError, any other SQLAlchemy error becomes StorageError.
        """
        try:
            result = action()
            self.session.commit()
            return result
        except AuthServiceError:
            self.session.rollback()
            raise
        except StaleDataError as e:
            self.session.rollback()
            raise ConflictError("The record was modified concurrently; reload and retry.") from e
        except IntegrityError as e:
            self.session.rollback()
            if is_unique_violation(e):
                raise ConflictError(conflict_message) from e
            logger.error("Integrity error during transaction: %s", e.orig)
            raise StorageError(cause=e) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Storage error during transaction: %s", e)
            raise StorageError(cause=e) from e
        except Exception:
            self.session.rollback()
            raise
