"""Request/response schemas for claim-action (claim x action permission) endpoints."""

from pydantic import Field

from auth_service.schemas.action import ActionResponse
from auth_service.schemas.claim import ClaimResponse
from auth_service.schemas.common import AuditResponse, CreatedByMixin, UpdatedByMixin


class ClaimActionCreate(CreatedByMixin):
    id_claim: int = Field(..., gt=0)
    id_action: int = Field(..., gt=0)


class ClaimActionUpdate(UpdatedByMixin):
    non_nullable_fields = ("id_claim", "id_action", "is_active")

    id_claim: int | None = Field(default=None, gt=0)
    id_action: int | None = Field(default=None, gt=0)
    is_active: bool | None = None


class ClaimActionResponse(AuditResponse):
    id_claim: int
    id_action: int
    claim: ClaimResponse | None = None
    action: ActionResponse | None = None
