"""Request-scoped dependencies: unit of work, services and the calling principal."""

from collections.abc import Generator
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth_service.core.config import Settings, get_settings
from auth_service.core.database import SessionLocal
from auth_service.core.security import (
    PERMISSION_CLAIM,
    CredentialHasher,
    TokenIssuer,
    get_credential_hasher,
    get_token_issuer,
)
from auth_service.schemas.auth import CurrentPrincipal
from auth_service.services.account import AccountService
from auth_service.services.account_claim_action import AccountClaimActionService
from auth_service.services.action import ActionService
from auth_service.services.application import ApplicationService
from auth_service.services.application_claim import ApplicationClaimService
from auth_service.services.claim import ClaimService
from auth_service.services.claim_action import ClaimActionService
from auth_service.unit_of_work import UnitOfWork

security = HTTPBearer(auto_error=False)


def get_unit_of_work() -> Generator[UnitOfWork, None, None]:
    """Dependency that yields a unit of work and closes its session when the request ends."""
    with UnitOfWork(SessionLocal) as uow:
        yield uow


def get_account_service(
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
    hasher: Annotated[CredentialHasher, Depends(get_credential_hasher)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AccountService:
    return AccountService(uow, hasher, token_issuer)


def get_claim_service(uow: Annotated[UnitOfWork, Depends(get_unit_of_work)]) -> ClaimService:
    return ClaimService(uow)


def get_action_service(uow: Annotated[UnitOfWork, Depends(get_unit_of_work)]) -> ActionService:
    return ActionService(uow)


def get_claim_action_service(uow: Annotated[UnitOfWork, Depends(get_unit_of_work)]) -> ClaimActionService:
    return ClaimActionService(uow)


def get_account_claim_action_service(
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> AccountClaimActionService:
    return AccountClaimActionService(uow)


def get_application_service(uow: Annotated[UnitOfWork, Depends(get_unit_of_work)]) -> ApplicationService:
    return ApplicationService(uow)


def get_application_claim_service(
    uow: Annotated[UnitOfWork, Depends(get_unit_of_work)],
) -> ApplicationClaimService:
    return ApplicationClaimService(uow)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> CurrentPrincipal:
    """
    Dependency: resolve the caller from a Bearer JWT issued by this service.

    When AUTH_ENABLED is false every request runs as DEFAULT_ACTOR. Otherwise a
    missing, expired or foreign token is rejected with 401.
    """
    if not settings.AUTH_ENABLED:
        return CurrentPrincipal(user_name=settings.DEFAULT_ACTOR)
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = token_issuer.decode(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    sub = payload.get("sub")
    if not sub:
        raise _unauthorized("Invalid token payload")
    permissions = payload.get(PERMISSION_CLAIM) or []
    return CurrentPrincipal(
        user_name=sub,
        account_id=payload.get("uid"),
        permissions=list(permissions),
    )


def resolve_actor(requested: str | None, principal: CurrentPrincipal) -> str:
    """Actor for audit columns: the one named in the payload, else the caller."""
    return requested or principal.user_name
