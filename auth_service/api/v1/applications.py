"""Application endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import get_application_service, get_current_principal, resolve_actor
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import ApplicationCreate, ApplicationResponse, ApplicationUpdate, CurrentPrincipal
from auth_service.services.application import ApplicationService

router = APIRouter()

Service = Annotated[ApplicationService, Depends(get_application_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[ApplicationResponse])
def list_applications(
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query()] = False,
) -> list[ApplicationResponse]:
    applications = service.get_all_active() if active_only else service.get_all()
    return [mapper.application_response(a) for a in applications]


@router.get("/by-name/{name}", response_model=ApplicationResponse)
def get_application_by_name(name: str, service: Service, mapper: Mapper) -> ApplicationResponse:
    return mapper.application_response(service.get_by_name(name))


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_application(application_id: int, service: Service, mapper: Mapper) -> ApplicationResponse:
    return mapper.application_response(service.get_by_id(application_id))


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def create_application(body: ApplicationCreate, service: Service, mapper: Mapper) -> ApplicationResponse:
    """Register an application. 409 if a live application already has the name."""
    application = service.add_application(mapper.to_application(body), body.created_by)
    return mapper.application_response(application)


@router.put("/{application_id}", response_model=ApplicationResponse)
def update_application(
    application_id: int,
    body: ApplicationUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ApplicationResponse:
    application = service.update_application(
        application_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.application_response(application)


@router.delete("/{application_id}", response_model=ApplicationResponse)
def delete_application(
    application_id: int,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ApplicationResponse:
    return mapper.application_response(service.delete_application(application_id, principal.user_name))
