"""Helpers shared by the entity services."""

from typing import TypeVar

from auth_service.core.errors import NotFoundError, ValidationError
from auth_service.models.base import ACTOR_MAX_LEN, AuditMixin

EntityT = TypeVar("EntityT", bound=AuditMixin)


def require_actor(actor: str | None) -> str:
    """Audit columns need a non-blank actor of at most ACTOR_MAX_LEN characters."""
    if actor is None or not actor.strip():
        raise ValidationError("An actor (created_by/updated_by/deleted_by) is required.")
    actor = actor.strip()
    if len(actor) > ACTOR_MAX_LEN:
        raise ValidationError(f"Actor must be at most {ACTOR_MAX_LEN} characters.")
    return actor


def found(entity: EntityT | None, label: str, key: object) -> EntityT:
    """Return entity, or raise NotFoundError naming what was looked up."""
    if entity is None:
        raise NotFoundError(f"{label} {key} not found.", details={"key": key})
    return entity


def live(entity: EntityT | None, label: str, key: object) -> EntityT:
    """Like found(), but soft-deleted rows count as missing."""
    if entity is None or entity.is_deleted:
        raise NotFoundError(f"{label} {key} not found.", details={"key": key})
    return entity
