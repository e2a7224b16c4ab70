"""Pydantic request/response schemas."""

from auth_service.schemas.account import (
    AccountCreate,
    AccountPasswordUpdate,
    AccountResponse,
    AccountUpdate,
    AccountUserNameUpdate,
)
from auth_service.schemas.account_claim_action import (
    AccountClaimActionCreate,
    AccountClaimActionResponse,
    AccountClaimActionUpdate,
)
from auth_service.schemas.action import ActionCreate, ActionResponse, ActionUpdate
from auth_service.schemas.application import ApplicationCreate, ApplicationResponse, ApplicationUpdate
from auth_service.schemas.application_claim import (
    ApplicationClaimCreate,
    ApplicationClaimResponse,
    ApplicationClaimUpdate,
)
from auth_service.schemas.auth import CurrentPrincipal, LoginRequest, TokenResponse
from auth_service.schemas.claim import ClaimCreate, ClaimResponse, ClaimUpdate
from auth_service.schemas.claim_action import (
    ClaimActionCreate,
    ClaimActionResponse,
    ClaimActionUpdate,
)
from auth_service.schemas.health import HealthResponse

__all__ = [
    "AccountClaimActionCreate",
    "AccountClaimActionResponse",
    "AccountClaimActionUpdate",
    "AccountCreate",
    "AccountPasswordUpdate",
    "AccountResponse",
    "AccountUpdate",
    "AccountUserNameUpdate",
    "ActionCreate",
    "ActionResponse",
    "ActionUpdate",
    "ApplicationClaimCreate",
    "ApplicationClaimResponse",
    "ApplicationClaimUpdate",
    "ApplicationCreate",
    "ApplicationResponse",
    "ApplicationUpdate",
    "ClaimActionCreate",
    "ClaimActionResponse",
    "ClaimActionUpdate",
    "ClaimCreate",
    "ClaimResponse",
    "ClaimUpdate",
    "CurrentPrincipal",
    "HealthResponse",
    "LoginRequest",
    "TokenResponse",
]
