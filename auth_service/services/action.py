"""Action service: CRUD over named operations."""

import logging
from typing import Any

from auth_service.models import Action
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ActionService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def get_all(self) -> list[Action]:
        return self.uow.actions.get_all()

    def get_all_active(self) -> list[Action]:
        return self.uow.actions.get_all_active()

    def get_by_id(self, action_id: int) -> Action:
        return found(self.uow.actions.get_by_id(action_id), "Action", action_id)

    def get_by_name(self, name: str) -> Action:
        return found(self.uow.actions.get_by_name(name), "Action", name)

    def add_action(self, action: Action, actor: str) -> Action:
        actor = require_actor(actor)
        return self.uow.execute_in_transaction(lambda: self.uow.actions.add(action, actor))

    def update_action(
        self,
        action_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> Action:
        actor = require_actor(actor)

        def _update() -> Action:
            action = self.uow.actions.update(action_id, changes, actor, expected_version)
            return live(action, "Action", action_id)

        return self.uow.execute_in_transaction(_update)

    def delete_action(self, action_id: int, actor: str) -> Action:
        """Soft delete the action, its claim-actions and their grants."""
        actor = require_actor(actor)

        def _delete() -> Action:
            action = live(self.uow.actions.get_by_id(action_id), "Action", action_id)
            marked = self.uow.actions.remove(action, actor)
            logger.info("Action deleted", extra={"action_id": action_id, "rows_marked": marked, "actor": actor})
            return action

        return self.uow.execute_in_transaction(_delete)
