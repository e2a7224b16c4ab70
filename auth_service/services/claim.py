"""Claim service: CRUD over claim definitions."""

import logging
from typing import Any

from auth_service.models import Claim
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ClaimService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def get_all(self) -> list[Claim]:
        return self.uow.claims.get_all()

    def get_all_active(self) -> list[Claim]:
        return self.uow.claims.get_all_active()

    def get_by_id(self, claim_id: int) -> Claim:
        return found(self.uow.claims.get_by_id(claim_id), "Claim", claim_id)

    def get_by_value(self, value: str) -> Claim:
        return found(self.uow.claims.get_by_value(value), "Claim", value)

    def add_claim(self, claim: Claim, actor: str) -> Claim:
        actor = require_actor(actor)
        return self.uow.execute_in_transaction(lambda: self.uow.claims.add(claim, actor))

    def update_claim(
        self,
        claim_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> Claim:
        actor = require_actor(actor)

        def _update() -> Claim:
            claim = self.uow.claims.update(claim_id, changes, actor, expected_version)
            return live(claim, "Claim", claim_id)

        return self.uow.execute_in_transaction(_update)

    def delete_claim(self, claim_id: int, actor: str) -> Claim:
        """Soft delete the claim, its claim-actions with their grants, and its application links."""
        actor = require_actor(actor)

        def _delete() -> Claim:
            claim = live(self.uow.claims.get_by_id(claim_id), "Claim", claim_id)
            marked = self.uow.claims.remove(claim, actor)
            logger.info("Claim deleted", extra={"claim_id": claim_id, "rows_marked": marked, "actor": actor})
            return claim

        return self.uow.execute_in_transaction(_delete)
