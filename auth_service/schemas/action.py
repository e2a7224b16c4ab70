"""Request/response schemas for action endpoints."""

from pydantic import Field, field_validator

from auth_service.schemas.common import AuditResponse, CreatedByMixin, UpdatedByMixin, reject_whitespace

ACTION_NAME_MAX_LEN = 50


class ActionCreate(CreatedByMixin):
    name: str = Field(..., min_length=1, max_length=ACTION_NAME_MAX_LEN, description="Action name, e.g. Delete")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return reject_whitespace(v, "name")


class ActionUpdate(UpdatedByMixin):
    non_nullable_fields = ("name", "is_active")

    name: str | None = Field(default=None, min_length=1, max_length=ACTION_NAME_MAX_LEN)
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return v if v is None else reject_whitespace(v, "name")


class ActionResponse(AuditResponse):
    name: str
