"""Token issuance: exchange user name and password for a signed JWT."""

from typing import Annotated

from fastapi import APIRouter, Depends

from auth_service.api.v1.deps import get_account_service
from auth_service.schemas.auth import LoginRequest, TokenResponse
from auth_service.services.account import AccountService

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def create_token(
    body: LoginRequest,
    service: Annotated[AccountService, Depends(get_account_service)],
) -> TokenResponse:
    """
    Authenticate with user name and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>

    404 when no live account has this user name, 401 when the account is
    disabled or the password does not match.
    """
    token = service.generate_token(body.user_name, body.password)
    return TokenResponse(
        access_token=token.access_token,
        token_type="bearer",
        expiration=token.expiration,
        user_name=token.user_name,
    )
