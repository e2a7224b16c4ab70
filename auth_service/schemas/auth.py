"""Request/response schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from auth_service.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USER_NAME_MAX_LEN,
    USER_NAME_MIN_LEN,
)


class LoginRequest(BaseModel):
    """Credentials for token issuance."""

    user_name: str = Field(..., min_length=USER_NAME_MIN_LEN, max_length=USER_NAME_MAX_LEN, description="User name")
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful authentication."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expiration: datetime = Field(..., description="Expiration instant (UTC)")
    user_name: str


class CurrentPrincipal(BaseModel):
    """Authenticated caller resolved from a Bearer token."""

    user_name: str
    account_id: int | None = None
    permissions: list[str] = Field(default_factory=list)
