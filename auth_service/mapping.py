"""Translation between validated payloads, ORM entities and response schemas."""

from typing import Any, TypeVar

from pydantic import BaseModel

from auth_service.models import (
    Account,
    AccountClaimAction,
    Action,
    Application,
    ApplicationClaim,
    Claim,
    ClaimAction,
)
from auth_service.schemas import (
    AccountClaimActionCreate,
    AccountClaimActionResponse,
    AccountCreate,
    AccountResponse,
    ActionCreate,
    ActionResponse,
    ApplicationClaimCreate,
    ApplicationClaimResponse,
    ApplicationCreate,
    ApplicationResponse,
    ClaimActionCreate,
    ClaimActionResponse,
    ClaimCreate,
    ClaimResponse,
)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Request fields that describe the request itself rather than entity state.
_REQUEST_ONLY_FIELDS = {"created_by", "updated_by", "version"}


class PayloadMapper:
    """
    Stateless mapper, constructed explicitly and injected where needed.

    to_* build new ORM entities from create payloads; changes() extracts the
    fields a client actually sent on an update; *_response convert ORM
    entities (with whatever relationships are loaded) into response schemas.
    """

    def to_account(self, payload: AccountCreate) -> Account:
        return Account(user_name=payload.user_name, password=payload.password)

    def to_claim(self, payload: ClaimCreate) -> Claim:
        return Claim(type=payload.type, value=payload.value, description=payload.description)

    def to_action(self, payload: ActionCreate) -> Action:
        return Action(name=payload.name)

    def to_claim_action(self, payload: ClaimActionCreate) -> ClaimAction:
        return ClaimAction(id_claim=payload.id_claim, id_action=payload.id_action)

    def to_account_claim_action(self, payload: AccountClaimActionCreate) -> AccountClaimAction:
        return AccountClaimAction(id_account=payload.id_account, id_claim_action=payload.id_claim_action)

    def to_application(self, payload: ApplicationCreate) -> Application:
        return Application(name=payload.name, description=payload.description)

    def to_application_claim(self, payload: ApplicationClaimCreate) -> ApplicationClaim:
        return ApplicationClaim(id_application=payload.id_application, id_claim=payload.id_claim)

    def changes(self, payload: BaseModel) -> dict[str, Any]:
        """Fields explicitly set on an update payload, minus actor/version bookkeeping."""
        return payload.model_dump(exclude_unset=True, exclude=_REQUEST_ONLY_FIELDS)

    def to_response(self, entity: object, schema: type[ResponseT]) -> ResponseT:
        return schema.model_validate(entity)

    def account_response(self, account: Account) -> AccountResponse:
        return self.to_response(account, AccountResponse)

    def claim_response(self, claim: Claim) -> ClaimResponse:
        return self.to_response(claim, ClaimResponse)

    def action_response(self, action: Action) -> ActionResponse:
        return self.to_response(action, ActionResponse)

    def claim_action_response(self, claim_action: ClaimAction) -> ClaimActionResponse:
        return self.to_response(claim_action, ClaimActionResponse)

    def account_claim_action_response(self, grant: AccountClaimAction) -> AccountClaimActionResponse:
        return self.to_response(grant, AccountClaimActionResponse)

    def application_response(self, application: Application) -> ApplicationResponse:
        return self.to_response(application, ApplicationResponse)

    def application_claim_response(self, application_claim: ApplicationClaim) -> ApplicationClaimResponse:
        return self.to_response(application_claim, ApplicationClaimResponse)


def get_mapper() -> PayloadMapper:
    """Dependency returning a mapper instance."""
    return PayloadMapper()
