"""Claim repository."""

from auth_service.models import Claim
from auth_service.repositories.base import AuditedRepository


class ClaimRepository(AuditedRepository[Claim]):
    model = Claim
    updatable_fields = ("type", "value", "description", "is_active")

    def get_by_value(self, value: str) -> Claim | None:
        return self._live().filter(Claim.value == value).order_by(Claim.id).first()
