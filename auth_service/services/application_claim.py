"""ApplicationClaim service: which claims each application relies on."""

import logging
from typing import Any

from auth_service.models import ApplicationClaim
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

DUPLICATE_LINK = "This claim is already linked to this application."


class ApplicationClaimService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def get_all(self) -> list[ApplicationClaim]:
        return self.uow.application_claims.get_all()

    def get_all_active(self) -> list[ApplicationClaim]:
        return self.uow.application_claims.get_all_active()

    def get_by_id(self, application_claim_id: int) -> ApplicationClaim:
        application_claim = self.uow.application_claims.get_by_id(application_claim_id)
        return found(application_claim, "ApplicationClaim", application_claim_id)

    def get_by_application_id(self, id_application: int) -> list[ApplicationClaim]:
        return self.uow.application_claims.get_by_application_id(id_application)

    def get_by_claim_id(self, id_claim: int) -> list[ApplicationClaim]:
        return self.uow.application_claims.get_by_claim_id(id_claim)

    def get_by_application_and_claim(self, id_application: int, id_claim: int) -> ApplicationClaim:
        application_claim = self.uow.application_claims.get_by_application_and_claim(id_application, id_claim)
        return found(application_claim, "ApplicationClaim", f"(application={id_application}, claim={id_claim})")

    def _check_parents(self, id_application: int | None, id_claim: int | None) -> None:
        if id_application is not None:
            live(self.uow.applications.get_by_id(id_application), "Application", id_application)
        if id_claim is not None:
            live(self.uow.claims.get_by_id(id_claim), "Claim", id_claim)

    def add_application_claim(self, application_claim: ApplicationClaim, actor: str) -> ApplicationClaim:
        """Link a live claim to a live application. A live duplicate link -> ConflictError."""
        actor = require_actor(actor)

        def _add() -> ApplicationClaim:
            self._check_parents(application_claim.id_application, application_claim.id_claim)
            return self.uow.application_claims.add(application_claim, actor)

        added = self.uow.execute_in_transaction(_add, conflict_message=DUPLICATE_LINK)
        logger.info(
            "Application claim created",
            extra={
                "application_claim_id": added.id,
                "id_application": added.id_application,
                "id_claim": added.id_claim,
            },
        )
        return added

    def update_application_claim(
        self,
        application_claim_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> ApplicationClaim:
        actor = require_actor(actor)

        def _update() -> ApplicationClaim:
            self._check_parents(changes.get("id_application"), changes.get("id_claim"))
            application_claim = self.uow.application_claims.update(
                application_claim_id, changes, actor, expected_version
            )
            return live(application_claim, "ApplicationClaim", application_claim_id)

        return self.uow.execute_in_transaction(_update, conflict_message=DUPLICATE_LINK)

    def delete_application_claim(self, application_claim_id: int, actor: str) -> ApplicationClaim:
        actor = require_actor(actor)

        def _delete() -> ApplicationClaim:
            application_claim = live(
                self.uow.application_claims.get_by_id(application_claim_id),
                "ApplicationClaim",
                application_claim_id,
            )
            self.uow.application_claims.remove(application_claim, actor)
            return application_claim

        return self.uow.execute_in_transaction(_delete)
