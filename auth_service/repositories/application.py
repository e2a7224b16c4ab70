"""Application repository."""

from auth_service.models import Application
from auth_service.repositories.base import AuditedRepository


class ApplicationRepository(AuditedRepository[Application]):
    model = Application
    updatable_fields = ("name", "description", "is_active")

    def get_by_name(self, name: str) -> Application | None:
        return self._live().filter(Application.name == name).first()
