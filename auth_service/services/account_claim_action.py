"""Grant service: assigning claim-actions to accounts."""

import logging
from typing import Any

from auth_service.models import AccountClaimAction
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

DUPLICATE_GRANT = "This account already holds this claim action."


class AccountClaimActionService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def get_all(self) -> list[AccountClaimAction]:
        return self.uow.account_claim_actions.get_all()

    def get_by_id(self, grant_id: int) -> AccountClaimAction:
        return found(self.uow.account_claim_actions.get_by_id(grant_id), "AccountClaimAction", grant_id)

    def get_by_id_account(self, id_account: int, active_only: bool = True) -> list[AccountClaimAction]:
        return self.uow.account_claim_actions.get_by_id_account(id_account, active_only=active_only)

    def get_by_id_claim_action(self, id_claim_action: int) -> list[AccountClaimAction]:
        return self.uow.account_claim_actions.get_by_id_claim_action(id_claim_action)

    def get_by_account_and_claim_action(self, id_account: int, id_claim_action: int) -> AccountClaimAction:
        grant = self.uow.account_claim_actions.get_by_account_and_claim_action(id_account, id_claim_action)
        return found(grant, "AccountClaimAction", f"(account={id_account}, claim_action={id_claim_action})")

    def _check_parents(self, id_account: int | None, id_claim_action: int | None) -> None:
        if id_account is not None:
            live(self.uow.accounts.get_by_id(id_account), "Account", id_account)
        if id_claim_action is not None:
            live(self.uow.claim_actions.get_by_id(id_claim_action), "ClaimAction", id_claim_action)

    def add_account_claim_action(self, grant: AccountClaimAction, actor: str) -> AccountClaimAction:
        """Grant a live claim-action to a live account. A live duplicate grant -> ConflictError."""
        actor = require_actor(actor)

        def _add() -> AccountClaimAction:
            self._check_parents(grant.id_account, grant.id_claim_action)
            return self.uow.account_claim_actions.add(grant, actor)

        added = self.uow.execute_in_transaction(_add, conflict_message=DUPLICATE_GRANT)
        logger.info(
            "Permission granted",
            extra={"grant_id": added.id, "id_account": added.id_account, "id_claim_action": added.id_claim_action},
        )
        return added

    def update_account_claim_action(
        self,
        grant_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> AccountClaimAction:
        actor = require_actor(actor)

        def _update() -> AccountClaimAction:
            self._check_parents(changes.get("id_account"), changes.get("id_claim_action"))
            grant = self.uow.account_claim_actions.update(grant_id, changes, actor, expected_version)
            return live(grant, "AccountClaimAction", grant_id)

        return self.uow.execute_in_transaction(_update, conflict_message=DUPLICATE_GRANT)

    def delete_account_claim_action(self, grant_id: int, actor: str) -> AccountClaimAction:
        actor = require_actor(actor)

        def _delete() -> AccountClaimAction:
            grant = live(self.uow.account_claim_actions.get_by_id(grant_id), "AccountClaimAction", grant_id)
            self.uow.account_claim_actions.remove(grant, actor)
            return grant

        grant = self.uow.execute_in_transaction(_delete)
        logger.info("Permission revoked", extra={"grant_id": grant_id, "actor": actor})
        return grant
