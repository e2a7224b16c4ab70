"""Claim endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import get_claim_service, get_current_principal, resolve_actor
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import ClaimCreate, ClaimResponse, ClaimUpdate, CurrentPrincipal
from auth_service.services.claim import ClaimService

router = APIRouter()

Service = Annotated[ClaimService, Depends(get_claim_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[ClaimResponse])
def list_claims(
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query()] = False,
) -> list[ClaimResponse]:
    claims = service.get_all_active() if active_only else service.get_all()
    return [mapper.claim_response(c) for c in claims]


@router.get("/by-value/{value}", response_model=ClaimResponse)
def get_claim_by_value(value: str, service: Service, mapper: Mapper) -> ClaimResponse:
    return mapper.claim_response(service.get_by_value(value))


@router.get("/{claim_id}", response_model=ClaimResponse)
def get_claim(claim_id: int, service: Service, mapper: Mapper) -> ClaimResponse:
    return mapper.claim_response(service.get_by_id(claim_id))


@router.post("", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
def create_claim(body: ClaimCreate, service: Service, mapper: Mapper) -> ClaimResponse:
    return mapper.claim_response(service.add_claim(mapper.to_claim(body), body.created_by))


@router.put("/{claim_id}", response_model=ClaimResponse)
def update_claim(
    claim_id: int,
    body: ClaimUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ClaimResponse:
    claim = service.update_claim(
        claim_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.claim_response(claim)


@router.delete("/{claim_id}", response_model=ClaimResponse)
def delete_claim(claim_id: int, service: Service, mapper: Mapper, principal: Principal) -> ClaimResponse:
    """Soft delete the claim together with its claim-actions and their grants."""
    return mapper.claim_response(service.delete_claim(claim_id, principal.user_name))
