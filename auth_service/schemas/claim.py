"""Request/response schemas for claim endpoints."""

from pydantic import Field, field_validator

from auth_service.models.claim import ClaimType
from auth_service.schemas.common import AuditResponse, CreatedByMixin, UpdatedByMixin

CLAIM_VALUE_MAX_LEN = 100
CLAIM_DESCRIPTION_MAX_LEN = 255


class ClaimCreate(CreatedByMixin):
    type: ClaimType = Field(..., description="Permission, Role or Custom")
    value: str = Field(..., min_length=1, max_length=CLAIM_VALUE_MAX_LEN, description="Claim value, e.g. invoice")
    description: str | None = Field(default=None, max_length=CLAIM_DESCRIPTION_MAX_LEN)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must not be blank.")
        return v


class ClaimUpdate(UpdatedByMixin):
    non_nullable_fields = ("type", "value", "is_active")

    type: ClaimType | None = None
    value: str | None = Field(default=None, min_length=1, max_length=CLAIM_VALUE_MAX_LEN)
    description: str | None = Field(default=None, max_length=CLAIM_DESCRIPTION_MAX_LEN)
    is_active: bool | None = None


class ClaimResponse(AuditResponse):
    type: ClaimType
    value: str
    description: str | None = None
