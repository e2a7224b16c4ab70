"""Application-claim endpoints: the claims each application relies on."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import get_application_claim_service, get_current_principal, resolve_actor
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import (
    ApplicationClaimCreate,
    ApplicationClaimResponse,
    ApplicationClaimUpdate,
    CurrentPrincipal,
)
from auth_service.services.application_claim import ApplicationClaimService

router = APIRouter()

Service = Annotated[ApplicationClaimService, Depends(get_application_claim_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[ApplicationClaimResponse])
def list_application_claims(
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query()] = False,
) -> list[ApplicationClaimResponse]:
    links = service.get_all_active() if active_only else service.get_all()
    return [mapper.application_claim_response(link) for link in links]


@router.get("/by-application/{id_application}", response_model=list[ApplicationClaimResponse])
def list_by_application(id_application: int, service: Service, mapper: Mapper) -> list[ApplicationClaimResponse]:
    return [mapper.application_claim_response(link) for link in service.get_by_application_id(id_application)]


@router.get("/by-claim/{id_claim}", response_model=list[ApplicationClaimResponse])
def list_by_claim(id_claim: int, service: Service, mapper: Mapper) -> list[ApplicationClaimResponse]:
    return [mapper.application_claim_response(link) for link in service.get_by_claim_id(id_claim)]


@router.get("/by-application-and-claim", response_model=ApplicationClaimResponse)
def get_by_application_and_claim(
    service: Service,
    mapper: Mapper,
    id_application: Annotated[int, Query(gt=0)],
    id_claim: Annotated[int, Query(gt=0)],
) -> ApplicationClaimResponse:
    return mapper.application_claim_response(service.get_by_application_and_claim(id_application, id_claim))


@router.get("/{application_claim_id}", response_model=ApplicationClaimResponse)
def get_application_claim(application_claim_id: int, service: Service, mapper: Mapper) -> ApplicationClaimResponse:
    return mapper.application_claim_response(service.get_by_id(application_claim_id))


@router.post("", response_model=ApplicationClaimResponse, status_code=status.HTTP_201_CREATED)
def create_application_claim(
    body: ApplicationClaimCreate,
    service: Service,
    mapper: Mapper,
) -> ApplicationClaimResponse:
    """Link a claim to an application. 404 if either is missing, 409 if already linked."""
    link = service.add_application_claim(mapper.to_application_claim(body), body.created_by)
    return mapper.application_claim_response(link)


@router.put("/{application_claim_id}", response_model=ApplicationClaimResponse)
def update_application_claim(
    application_claim_id: int,
    body: ApplicationClaimUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ApplicationClaimResponse:
    link = service.update_application_claim(
        application_claim_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.application_claim_response(link)


@router.delete("/{application_claim_id}", response_model=ApplicationClaimResponse)
def delete_application_claim(
    application_claim_id: int,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ApplicationClaimResponse:
    link = service.delete_application_claim(application_claim_id, principal.user_name)
    return mapper.application_claim_response(link)
