"""Generic repository over audited entities: queries, audited mutations and soft delete."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Query, Session

from auth_service.core.errors import ConflictError
from auth_service.models.base import AuditMixin, utc_now

ModelT = TypeVar("ModelT", bound=AuditMixin)


def soft_delete(entity: AuditMixin, actor: str, when: datetime | None = None) -> int:
    """
    Mark entity and, transitively, its live dependents as deleted.

    Dependents are the relationships named in the model's __soft_delete_cascade__.
    Already-deleted rows are left untouched. Returns the number of rows marked.
    """
    if entity.is_deleted:
        return 0
    when = when or utc_now()
    entity.is_active = False
    entity.dt_deleted = when
    entity.deleted_by = actor
    entity.dt_updated = when
    entity.updated_by = actor
    marked = 1
    for relation in getattr(entity, "__soft_delete_cascade__", ()):
        for child in getattr(entity, relation):
            marked += soft_delete(child, actor, when)
    return marked


class AuditedRepository(Generic[ModelT]):
    """
    Query/mutation surface for one entity type, bound to the unit of work's session.

    Query methods never mutate state. Mutations flush but never commit; the unit
    of work owns the transaction. Rows are never physically deleted here except
    through purge_deleted_before, which only the retention job calls.
    """

    model: type[ModelT]
    # Fields update() may copy from a change set; audit columns are never in here.
    updatable_fields: tuple[str, ...] = ()

    def __init__(self, session: Session) -> None:
        self.session = session

    def _query(self) -> Query:
        return self.session.query(self.model)

    def _live(self) -> Query:
        return self._query().filter(self.model.dt_deleted.is_(None))

    # Queries

    def get_by_id(self, entity_id: int) -> ModelT | None:
        """Direct lookup; soft-deleted rows are still returned."""
        return self.session.get(self.model, entity_id)

    def get_by_ids(self, entity_ids: Iterable[int]) -> list[ModelT]:
        ids = list(entity_ids)
        if not ids:
            return []
        return self._query().filter(self.model.id.in_(ids)).order_by(self.model.id).all()

    def get_all(self) -> list[ModelT]:
        """Every row, soft-deleted ones included."""
        return self._query().order_by(self.model.id).all()

    def get_all_active(self) -> list[ModelT]:
        return (
            self._live()
            .filter(self.model.is_active.is_(True))
            .order_by(self.model.id)
            .all()
        )

    # Mutations

    def add(self, entity: ModelT, actor: str) -> ModelT:
        entity.dt_created = utc_now()
        entity.created_by = actor
        entity.is_active = True if entity.is_active is None else entity.is_active
        entity.dt_updated = None
        entity.updated_by = None
        entity.dt_deleted = None
        entity.deleted_by = None
        self.session.add(entity)
        self.session.flush()
        return entity

    def add_range(self, entities: Iterable[ModelT], actor: str) -> list[ModelT]:
        return [self.add(entity, actor) for entity in entities]

    def update(
        self,
        entity_id: int,
        changes: Mapping[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> ModelT | None:
        """
        Load the tracked row, copy allowed fields from changes, stamp dt_updated/updated_by.

        Returns None when the row does not exist or is soft-deleted. Raises
        ConflictError when expected_version is given and no longer matches.
        """
        entity = self.get_by_id(entity_id)
        if entity is None or entity.is_deleted:
            return None
        if expected_version is not None and entity.version != expected_version:
            raise ConflictError(
                f"{self.model.__name__} {entity_id} was modified concurrently.",
                details={"expected_version": expected_version, "current_version": entity.version},
            )
        for field in self.updatable_fields:
            if field in changes:
                setattr(entity, field, changes[field])
        self._stamp_update(entity, actor)
        self.session.flush()
        return entity

    def remove(self, entity: ModelT, actor: str) -> int:
        """Soft delete entity and its dependents; returns the number of rows marked."""
        marked = soft_delete(entity, actor)
        self.session.flush()
        return marked

    def remove_range(self, entities: Iterable[ModelT], actor: str) -> int:
        when = utc_now()
        marked = sum(soft_delete(entity, actor, when) for entity in entities)
        self.session.flush()
        return marked

    def purge_deleted_before(self, cutoff: datetime) -> int:
        """Physically delete rows soft-deleted before cutoff; the store cascades to children."""
        return (
            self.session.query(self.model)
            .filter(self.model.dt_deleted.is_not(None), self.model.dt_deleted < cutoff)
            .delete(synchronize_session=False)
        )

    @staticmethod
    def _stamp_update(entity: ModelT, actor: str) -> None:
        entity.dt_updated = utc_now()
        entity.updated_by = actor
