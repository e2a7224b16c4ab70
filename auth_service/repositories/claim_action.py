"""ClaimAction repository: lookups by claim, by action and by the (claim, action) pair."""

from sqlalchemy.orm import Query, joinedload

from auth_service.models import ClaimAction
from auth_service.repositories.base import AuditedRepository


class ClaimActionRepository(AuditedRepository[ClaimAction]):
    model = ClaimAction
    updatable_fields = ("id_claim", "id_action", "is_active")

    def _query(self) -> Query:
        return (
            self.session.query(ClaimAction)
            .options(joinedload(ClaimAction.claim), joinedload(ClaimAction.action))
        )

    def get_by_claim_and_action(self, id_claim: int, id_action: int) -> ClaimAction | None:
        """The live row for the pair, if any. At most one exists (partial unique index)."""
        return (
            self._live()
            .filter(ClaimAction.id_claim == id_claim, ClaimAction.id_action == id_action)
            .first()
        )

    def get_by_claim_id(self, id_claim: int) -> list[ClaimAction]:
        return (
            self._live()
            .filter(ClaimAction.id_claim == id_claim)
            .order_by(ClaimAction.id)
            .all()
        )

    def get_by_action_id(self, id_action: int) -> list[ClaimAction]:
        return (
            self._live()
            .filter(ClaimAction.id_action == id_action)
            .order_by(ClaimAction.id)
            .all()
        )
