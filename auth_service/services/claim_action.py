"""ClaimAction service: pairing claims with actions to form permissions."""

import logging
from typing import Any

from auth_service.models import ClaimAction
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

DUPLICATE_PAIR = "This claim is already paired with this action."


class ClaimActionService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def get_all(self) -> list[ClaimAction]:
        return self.uow.claim_actions.get_all()

    def get_all_active(self) -> list[ClaimAction]:
        return self.uow.claim_actions.get_all_active()

    def get_by_id(self, claim_action_id: int) -> ClaimAction:
        return found(self.uow.claim_actions.get_by_id(claim_action_id), "ClaimAction", claim_action_id)

    def get_by_claim_and_action(self, id_claim: int, id_action: int) -> ClaimAction:
        claim_action = self.uow.claim_actions.get_by_claim_and_action(id_claim, id_action)
        return found(claim_action, "ClaimAction", f"(claim={id_claim}, action={id_action})")

    def get_by_claim_id(self, id_claim: int) -> list[ClaimAction]:
        return self.uow.claim_actions.get_by_claim_id(id_claim)

    def get_by_action_id(self, id_action: int) -> list[ClaimAction]:
        return self.uow.claim_actions.get_by_action_id(id_action)

    def _check_parents(self, id_claim: int | None, id_action: int | None) -> None:
        if id_claim is not None:
            live(self.uow.claims.get_by_id(id_claim), "Claim", id_claim)
        if id_action is not None:
            live(self.uow.actions.get_by_id(id_action), "Action", id_action)

    def add_claim_action(self, claim_action: ClaimAction, actor: str) -> ClaimAction:
        """Pair a live claim with a live action. A live duplicate pair -> ConflictError."""
        actor = require_actor(actor)

        def _add() -> ClaimAction:
            self._check_parents(claim_action.id_claim, claim_action.id_action)
            return self.uow.claim_actions.add(claim_action, actor)

        added = self.uow.execute_in_transaction(_add, conflict_message=DUPLICATE_PAIR)
        logger.info(
            "Claim action created",
            extra={"claim_action_id": added.id, "id_claim": added.id_claim, "id_action": added.id_action},
        )
        return added

    def update_claim_action(
        self,
        claim_action_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> ClaimAction:
        actor = require_actor(actor)

        def _update() -> ClaimAction:
            self._check_parents(changes.get("id_claim"), changes.get("id_action"))
            claim_action = self.uow.claim_actions.update(claim_action_id, changes, actor, expected_version)
            return live(claim_action, "ClaimAction", claim_action_id)

        return self.uow.execute_in_transaction(_update, conflict_message=DUPLICATE_PAIR)

    def delete_claim_action(self, claim_action_id: int, actor: str) -> ClaimAction:
        """Soft delete the pairing and every grant of it."""
        actor = require_actor(actor)

        def _delete() -> ClaimAction:
            claim_action = live(self.uow.claim_actions.get_by_id(claim_action_id), "ClaimAction", claim_action_id)
            self.uow.claim_actions.remove(claim_action, actor)
            return claim_action

        return self.uow.execute_in_transaction(_delete)
