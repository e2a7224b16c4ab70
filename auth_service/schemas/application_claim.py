"""Request/response schemas for application-claim endpoints."""

from pydantic import Field

from auth_service.schemas.application import ApplicationResponse
from auth_service.schemas.claim import ClaimResponse
from auth_service.schemas.common import AuditResponse, CreatedByMixin, UpdatedByMixin


class ApplicationClaimCreate(CreatedByMixin):
    id_application: int = Field(..., gt=0)
    id_claim: int = Field(..., gt=0)


class ApplicationClaimUpdate(UpdatedByMixin):
    non_nullable_fields = ("id_application", "id_claim", "is_active")

    id_application: int | None = Field(default=None, gt=0)
    id_claim: int | None = Field(default=None, gt=0)
    is_active: bool | None = None


class ApplicationClaimResponse(AuditResponse):
    id_application: int
    id_claim: int
    application: ApplicationResponse | None = None
    claim: ClaimResponse | None = None
