"""Application service: CRUD over registered client applications."""

import logging
from typing import Any

from auth_service.models import Application
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Application name is already taken."


class ApplicationService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def get_all(self) -> list[Application]:
        return self.uow.applications.get_all()

    def get_all_active(self) -> list[Application]:
        return self.uow.applications.get_all_active()

    def get_by_id(self, application_id: int) -> Application:
        return found(self.uow.applications.get_by_id(application_id), "Application", application_id)

    def get_by_name(self, name: str) -> Application:
        return found(self.uow.applications.get_by_name(name), "Application", name)

    def add_application(self, application: Application, actor: str) -> Application:
        actor = require_actor(actor)
        added = self.uow.execute_in_transaction(
            lambda: self.uow.applications.add(application, actor),
            conflict_message=DUPLICATE_NAME,
        )
        logger.info("Application created", extra={"application_id": added.id, "actor": actor})
        return added

    def update_application(
        self,
        application_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> Application:
        actor = require_actor(actor)

        def _update() -> Application:
            application = self.uow.applications.update(application_id, changes, actor, expected_version)
            return live(application, "Application", application_id)

        return self.uow.execute_in_transaction(_update, conflict_message=DUPLICATE_NAME)

    def delete_application(self, application_id: int, actor: str) -> Application:
        """Soft delete the application and its claim links."""
        actor = require_actor(actor)

        def _delete() -> Application:
            application = live(self.uow.applications.get_by_id(application_id), "Application", application_id)
            marked = self.uow.applications.remove(application, actor)
            logger.info(
                "Application deleted",
                extra={"application_id": application_id, "rows_marked": marked, "actor": actor},
            )
            return application

        return self.uow.execute_in_transaction(_delete)
