"""Account endpoints: lifecycle and credential changes. Password hashes are never returned."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from auth_service.api.v1.deps import get_account_service, get_current_principal, resolve_actor
from auth_service.mapping import PayloadMapper, get_mapper
from auth_service.schemas import (
    AccountCreate,
    AccountPasswordUpdate,
    AccountResponse,
    AccountUpdate,
    AccountUserNameUpdate,
    CurrentPrincipal,
)
from auth_service.services.account import AccountService

router = APIRouter()

Service = Annotated[AccountService, Depends(get_account_service)]
Mapper = Annotated[PayloadMapper, Depends(get_mapper)]
Principal = Annotated[CurrentPrincipal, Depends(get_current_principal)]


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    service: Service,
    mapper: Mapper,
    active_only: Annotated[bool, Query(description="Only live, active accounts")] = False,
) -> list[AccountResponse]:
    accounts = service.get_all_active() if active_only else service.get_all()
    return [mapper.account_response(a) for a in accounts]


@router.get("/by-user-name/{user_name}", response_model=AccountResponse)
def get_account_by_user_name(user_name: str, service: Service, mapper: Mapper) -> AccountResponse:
    return mapper.account_response(service.get_by_user_name(user_name))


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: int, service: Service, mapper: Mapper) -> AccountResponse:
    return mapper.account_response(service.get_by_id(account_id))


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(body: AccountCreate, service: Service, mapper: Mapper) -> AccountResponse:
    """Create an account; the password is stored as an Argon2id hash. 409 if the user name is taken."""
    account = service.add_account(mapper.to_account(body), body.created_by)
    return mapper.account_response(account)


@router.put("/password", response_model=AccountResponse)
def change_password(
    body: AccountPasswordUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> AccountResponse:
    account = service.update_account_password(
        body.user_name,
        body.new_password,
        resolve_actor(body.updated_by, principal),
    )
    return mapper.account_response(account)


@router.put("/user-name", response_model=AccountResponse)
def change_user_name(
    body: AccountUserNameUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> AccountResponse:
    account = service.update_account_user_name(
        body.old_user_name,
        body.new_user_name,
        resolve_actor(body.updated_by, principal),
    )
    return mapper.account_response(account)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    body: AccountUpdate,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> AccountResponse:
    """Update user name / active flag; the password changes only when one is sent."""
    account = service.update_account(
        account_id,
        mapper.changes(body),
        resolve_actor(body.updated_by, principal),
        expected_version=body.version,
    )
    return mapper.account_response(account)


@router.delete("/{account_id}", response_model=AccountResponse)
def delete_account(
    account_id: int,
    service: Service,
    mapper: Mapper,
    principal: Principal,
) -> AccountResponse:
    """Soft delete the account and its grants; returns the deleted account."""
    account = service.delete_account(account_id, principal.user_name)
    return mapper.account_response(account)
