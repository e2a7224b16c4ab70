"""AccountClaimAction repository: grant lookups used for permission checks and token issuance."""

from sqlalchemy.orm import aliased, joinedload

from auth_service.models import AccountClaimAction, Action, Claim, ClaimAction
from auth_service.repositories.base import AuditedRepository


class AccountClaimActionRepository(AuditedRepository[AccountClaimAction]):
    model = AccountClaimAction
    updatable_fields = ("id_account", "id_claim_action", "is_active")

    def get_by_id_account(self, id_account: int, active_only: bool = True) -> list[AccountClaimAction]:
        """
        Grants of an account with ClaimAction -> Claim and ClaimAction -> Action eager-loaded.

        With active_only, a grant counts only when the grant, its claim-action,
        the claim and the action are all live and active.
        """
        query = (
            self.session.query(AccountClaimAction)
            .options(
                joinedload(AccountClaimAction.claim_action).joinedload(ClaimAction.claim),
                joinedload(AccountClaimAction.claim_action).joinedload(ClaimAction.action),
            )
            .filter(AccountClaimAction.id_account == id_account)
        )
        if active_only:
            claim_action = aliased(ClaimAction)
            claim = aliased(Claim)
            action = aliased(Action)
            query = (
                query.join(claim_action, AccountClaimAction.id_claim_action == claim_action.id)
                .join(claim, claim_action.id_claim == claim.id)
                .join(action, claim_action.id_action == action.id)
                .filter(
                    AccountClaimAction.dt_deleted.is_(None),
                    AccountClaimAction.is_active.is_(True),
                    claim_action.dt_deleted.is_(None),
                    claim_action.is_active.is_(True),
                    claim.dt_deleted.is_(None),
                    claim.is_active.is_(True),
                    action.dt_deleted.is_(None),
                    action.is_active.is_(True),
                )
            )
        return query.order_by(AccountClaimAction.id).all()

    def get_by_id_claim_action(self, id_claim_action: int) -> list[AccountClaimAction]:
        """Live grants of a claim-action with the granted Account eager-loaded."""
        return (
            self._live()
            .options(joinedload(AccountClaimAction.account))
            .filter(AccountClaimAction.id_claim_action == id_claim_action)
            .order_by(AccountClaimAction.id)
            .all()
        )

    def get_by_account_and_claim_action(
        self, id_account: int, id_claim_action: int
    ) -> AccountClaimAction | None:
        return (
            self._live()
            .filter(
                AccountClaimAction.id_account == id_account,
                AccountClaimAction.id_claim_action == id_claim_action,
            )
            .first()
        )
