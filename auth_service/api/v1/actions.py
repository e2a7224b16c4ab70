"""Action endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import get_action_service, get_current_principal, resolve_actor
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import ActionCreate, ActionResponse, ActionUpdate, CurrentPrincipal
from auth_service.services.action import ActionService

router = APIRouter()

Service = Annotated[ActionService, Depends(get_action_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[ActionResponse])
def list_actions(
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query()] = False,
) -> list[ActionResponse]:
    actions = service.get_all_active() if active_only else service.get_all()
    return [mapper.action_response(a) for a in actions]


@router.get("/by-name/{name}", response_model=ActionResponse)
def get_action_by_name(name: str, service: Service, mapper: Mapper) -> ActionResponse:
    return mapper.action_response(service.get_by_name(name))


@router.get("/{action_id}", response_model=ActionResponse)
def get_action(action_id: int, service: Service, mapper: Mapper) -> ActionResponse:
    return mapper.action_response(service.get_by_id(action_id))


@router.post("", response_model=ActionResponse, status_code=status.HTTP_201_CREATED)
def create_action(body: ActionCreate, service: Service, mapper: Mapper) -> ActionResponse:
    return mapper.action_response(service.add_action(mapper.to_action(body), body.created_by))


@router.put("/{action_id}", response_model=ActionResponse)
def update_action(
    action_id: int,
    body: ActionUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> ActionResponse:
    action = service.update_action(
        action_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.action_response(action)


@router.delete("/{action_id}", response_model=ActionResponse)
def delete_action(action_id: int, service: Service, mapper: Mapper, principal: Principal) -> ActionResponse:
    return mapper.action_response(service.delete_action(action_id, principal.user_name))
