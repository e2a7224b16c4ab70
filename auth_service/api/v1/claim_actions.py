"""Claim-action endpoints: the claim x action pairs that make up permissions."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import get_claim_action_service, get_current_principal, resolve_actor
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import (
    ClaimActionCreate,
    ClaimActionResponse,
    ClaimActionUpdate,
    CurrentPrincipal,
)
from auth_service.services.claim_action import ClaimActionService

router = APIRouter()

Service = Annotated[ClaimActionService, Depends(get_claim_action_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[ClaimActionResponse])
def list_claim_actions(
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query()] = False,
    id_claim: Annotated[int | None, Query(gt=0)] = None,
    id_action: Annotated[int | None, Query(gt=0)] = None,
) -> list[ClaimActionResponse]:
    """List claim-actions, optionally narrowed to one claim or one action (live rows only)."""
    if id_claim is not None:
        claim_actions = service.get_by_claim_id(id_claim)
    elif id_action is not None:
        claim_actions = service.get_by_action_id(id_action)
    elif active_only:
        claim_actions = service.get_all_active()
    else:
        claim_actions = service.get_all()
    return [mapper.claim_action_response(ca) for ca in claim_actions]


@router.get("/by-claim-and-action", response_model=ClaimActionResponse)
def get_claim_action_by_pair(
    service: Service,
    mapper: Mapper,
    id_claim: Annotated[int, Query(gt=0)],
    id_action: Annotated[int, Query(gt=0)],
) -> ClaimActionResponse:
    return mapper.claim_action_response(service.get_by_claim_and_action(id_claim, id_action))


@router.get("/{claim_action_id}", response_model=ClaimActionResponse)
def get_claim_action(claim_action_id: int, service: Service, mapper: Mapper) -> ClaimActionResponse:
    return mapper.claim_action_response(service.get_by_id(claim_action_id))


@router.post("", response_model=ClaimActionResponse, status_code=status.HTTP_201_CREATED)
def create_claim_action(body: ClaimActionCreate, service: Service, mapper: Mapper) -> ClaimActionResponse:
    """Pair a claim with an action. 404 if either is missing, 409 if the pair already exists."""
    claim_action = service.add_claim_action(mapper.to_claim_action(body), body.created_by)
    return mapper.claim_action_response(claim_action)


@router.put("/{claim_action_id}", response_model=ClaimActionResponse)
def update_claim_action(
    claim_action_id: int,
    body: ClaimActionUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ClaimActionResponse:
    claim_action = service.update_claim_action(
        claim_action_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.claim_action_response(claim_action)


@router.delete("/{claim_action_id}", response_model=ClaimActionResponse)
def delete_claim_action(
    claim_action_id: int,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ClaimActionResponse:
    claim_action = service.delete_claim_action(claim_action_id, principal.user_name)
    return mapper.claim_action_response(claim_action)
