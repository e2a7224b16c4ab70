"""Request/response schemas for application endpoints."""

from pydantic import Field, field_validator

from auth_service.schemas.common import AuditResponse, CreatedByMixin, UpdatedByMixin, reject_whitespace

APPLICATION_NAME_MAX_LEN = 100
APPLICATION_DESCRIPTION_MAX_LEN = 500


class ApplicationCreate(CreatedByMixin):
    name: str = Field(..., min_length=1, max_length=APPLICATION_NAME_MAX_LEN, description="Application name, no spaces")
    description: str = Field(..., min_length=1, max_length=APPLICATION_DESCRIPTION_MAX_LEN)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return reject_whitespace(v, "name")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be blank.")
        return v


class ApplicationUpdate(UpdatedByMixin):
    non_nullable_fields = ("name", "description", "is_active")

    name: str | None = Field(default=None, min_length=1, max_length=APPLICATION_NAME_MAX_LEN)
    description: str | None = Field(default=None, min_length=1, max_length=APPLICATION_DESCRIPTION_MAX_LEN)
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return v if v is None else reject_whitespace(v, "name")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("description must not be blank.")
        return v


class ApplicationResponse(AuditResponse):
    name: str
    description: str
