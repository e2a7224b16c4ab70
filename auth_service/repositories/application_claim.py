"""ApplicationClaim repository: lookups by application, by claim and by the pair."""

from sqlalchemy.orm import Query, joinedload

from auth_service.models import ApplicationClaim
from auth_service.repositories.base import AuditedRepository


class ApplicationClaimRepository(AuditedRepository[ApplicationClaim]):
    model = ApplicationClaim
    updatable_fields = ("id_application", "id_claim", "is_active")

    def _query(self) -> Query:
        return (
            self.session.query(ApplicationClaim)
            .options(joinedload(ApplicationClaim.application), joinedload(ApplicationClaim.claim))
        )

    def get_by_application_and_claim(self, id_application: int, id_claim: int) -> ApplicationClaim | None:
        return (
            self._live()
            .filter(ApplicationClaim.id_application == id_application, ApplicationClaim.id_claim == id_claim)
            .first()
        )

    def get_by_application_id(self, id_application: int) -> list[ApplicationClaim]:
        """Live, active links of one application."""
        return (
            self._live()
            .filter(ApplicationClaim.id_application == id_application, ApplicationClaim.is_active.is_(True))
            .order_by(ApplicationClaim.id)
            .all()
        )

    def get_by_claim_id(self, id_claim: int) -> list[ApplicationClaim]:
        """Live, active links to one claim."""
        return (
            self._live()
            .filter(ApplicationClaim.id_claim == id_claim, ApplicationClaim.is_active.is_(True))
            .order_by(ApplicationClaim.id)
            .all()
        )
