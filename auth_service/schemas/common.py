"""Shared schema pieces: audit fields on responses and reusable input rules."""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator

ACTOR_MAX_LEN = 100


def reject_whitespace(value: str, field_name: str) -> str:
    """Reject blank values and values with embedded whitespace."""
    if not value or not value.strip():
        raise ValueError(f"{field_name} must not be empty.")
    if any(ch.isspace() for ch in value):
        raise ValueError(f"{field_name} cannot contain spaces.")
    return value


class AuditResponse(BaseModel):
    """Audit columns returned with every entity."""

    id: int
    is_active: bool
    dt_created: datetime
    dt_updated: datetime | None = None
    dt_deleted: datetime | None = None
    created_by: str
    updated_by: str | None = None
    deleted_by: str | None = None
    version: int

    class Config:
        from_attributes = True


class CreatedByMixin(BaseModel):
    created_by: str = Field(..., min_length=1, max_length=ACTOR_MAX_LEN, description="Actor creating the record")


class UpdatedByMixin(BaseModel):
    updated_by: str | None = Field(
        default=None,
        min_length=1,
        max_length=ACTOR_MAX_LEN,
        description="Actor updating the record (defaults to the caller)",
    )
    version: int | None = Field(
        default=None,
        ge=1,
        description="Version read by the client; a mismatch is rejected with 409",
    )

    # Fields a client may omit on update but never clear with an explicit null.
    non_nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_explicit_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            cleared = [name for name in cls.non_nullable_fields if name in data and data[name] is None]
            if cleared:
                raise ValueError(f"{', '.join(cleared)} cannot be null.")
        return data
