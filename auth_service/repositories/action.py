"""Action repository."""

from auth_service.models import Action
from auth_service.repositories.base import AuditedRepository


class ActionRepository(AuditedRepository[Action]):
    model = Action
    updatable_fields = ("name", "is_active")

    def get_by_name(self, name: str) -> Action | None:
        return self._live().filter(Action.name == name).order_by(Action.id).first()
