"""Request/response schemas for grant (account x claim-action) endpoints."""

from pydantic import Field

from auth_service.schemas.account import AccountResponse
from auth_service.schemas.claim_action import ClaimActionResponse
from auth_service.schemas.common import AuditResponse, CreatedByMixin, UpdatedByMixin


class AccountClaimActionCreate(CreatedByMixin):
    id_account: int = Field(..., gt=0)
    id_claim_action: int = Field(..., gt=0)


class AccountClaimActionUpdate(UpdatedByMixin):
    non_nullable_fields = ("id_account", "id_claim_action", "is_active")

    id_account: int | None = Field(default=None, gt=0)
    id_claim_action: int | None = Field(default=None, gt=0)
    is_active: bool | None = None


class AccountClaimActionResponse(AuditResponse):
    id_account: int
    id_claim_action: int
    account: AccountResponse | None = None
    claim_action: ClaimActionResponse | None = None
