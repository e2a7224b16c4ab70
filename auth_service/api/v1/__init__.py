"""API v1 routes."""

from fastapi import APIRouter, Depends

from auth_service.api.v1 import (
    account_claim_actions,
    accounts,
    actions,
    application_claims,
    applications,
    auth,
    claim_actions,
    claims,
    health,
)
from auth_service.api.v1.deps import get_current_principal

# Every CRUD route requires a principal; with AUTH_ENABLED=false it is synthetic.
protected = [Depends(get_current_principal)]

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/authentication", tags=["authentication"])
router.include_router(accounts.router, prefix="/accounts", tags=["accounts"], dependencies=protected)
router.include_router(claims.router, prefix="/claims", tags=["claims"], dependencies=protected)
router.include_router(actions.router, prefix="/actions", tags=["actions"], dependencies=protected)
router.include_router(
    claim_actions.router, prefix="/claim-actions", tags=["claim-actions"], dependencies=protected
)
router.include_router(
    account_claim_actions.router,
    prefix="/account-claim-actions",
    tags=["account-claim-actions"],
    dependencies=protected,
)
router.include_router(applications.router, prefix="/applications", tags=["applications"], dependencies=protected)
router.include_router(
    application_claims.router,
    prefix="/application-claims",
    tags=["application-claims"],
    dependencies=protected,
)
