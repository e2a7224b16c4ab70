"""Grant endpoints: which accounts hold which claim-actions."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import (
    get_account_claim_action_service,
    get_current_principal,
    resolve_actor,
)
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import (
    AccountClaimActionCreate,
    AccountClaimActionResponse,
    AccountClaimActionUpdate,
    CurrentPrincipal,
)
from auth_service.services.account_claim_action import AccountClaimActionService

router = APIRouter()

Service = Annotated[AccountClaimActionService, Depends(get_account_claim_action_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[AccountClaimActionResponse])
def list_grants(service: Service, mapper: Mapper) -> list[AccountClaimActionResponse]:
    return [mapper.account_claim_action_response(g) for g in service.get_all()]


@router.get("/by-account/{id_account}", response_model=list[AccountClaimActionResponse])
def list_grants_by_account(
    id_account: int,
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query(description="Skip grants whose claim or action is gone")] = True,
) -> list[AccountClaimActionResponse]:
    grants = service.get_by_id_account(id_account, active_only=active_only)
    return [mapper.account_claim_action_response(g) for g in grants]


@router.get("/by-claim-action/{id_claim_action}", response_model=list[AccountClaimActionResponse])
def list_grants_by_claim_action(
    id_claim_action: int,
    service: Service,
    mapper: Mapper,
) -> list[AccountClaimActionResponse]:
    grants = service.get_by_id_claim_action(id_claim_action)
    return [mapper.account_claim_action_response(g) for g in grants]


@router.get("/{grant_id}", response_model=AccountClaimActionResponse)
def get_grant(grant_id: int, service: Service, mapper: Mapper) -> AccountClaimActionResponse:
    return mapper.account_claim_action_response(service.get_by_id(grant_id))


@router.post("", response_model=AccountClaimActionResponse, status_code=status.HTTP_201_CREATED)
def create_grant(body: AccountClaimActionCreate, service: Service, mapper: Mapper) -> AccountClaimActionResponse:
    """Grant a claim-action to an account. 404 if either is missing, 409 if already granted."""
    grant = service.add_account_claim_action(mapper.to_account_claim_action(body), body.created_by)
    return mapper.account_claim_action_response(grant)


@router.put("/{grant_id}", response_model=AccountClaimActionResponse)
def update_grant(
    grant_id: int,
    body: AccountClaimActionUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> AccountClaimActionResponse:
    grant = service.update_account_claim_action(
        grant_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.account_claim_action_response(grant)


@router.delete("/{grant_id}", response_model=AccountClaimActionResponse)
def delete_grant(grant_id: int, service: Service, mapper: Mapper, principal: Principal) -> AccountClaimActionResponse:
    grant = service.delete_account_claim_action(grant_id, principal.user_name)
    return mapper.account_claim_action_response(grant)
