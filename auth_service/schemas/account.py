"""Request/response schemas for account endpoints. Password hashes are never returned."""

from pydantic import BaseModel, Field, field_validator

from auth_service.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USER_NAME_MAX_LEN,
    USER_NAME_MIN_LEN,
)
from auth_service.schemas.common import (
    ACTOR_MAX_LEN,
    AuditResponse,
    CreatedByMixin,
    UpdatedByMixin,
    reject_whitespace,
)


def _user_name_field(description: str = "User name"):
    return Field(
        ...,
        min_length=USER_NAME_MIN_LEN,
        max_length=USER_NAME_MAX_LEN,
        description=description,
    )


def _password_field(description: str = "Password"):
    return Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description=description,
    )


class AccountCreate(CreatedByMixin):
    """Payload for creating an account; password is plaintext and hashed by the service."""

    user_name: str = _user_name_field()
    password: str = _password_field()

    @field_validator("user_name")
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        return reject_whitespace(v, "user_name")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return reject_whitespace(v, "password")


class AccountUpdate(UpdatedByMixin):
    """Profile update. Omit password to keep the stored credential."""

    non_nullable_fields = ("user_name", "is_active")

    user_name: str | None = Field(
        default=None,
        min_length=USER_NAME_MIN_LEN,
        max_length=USER_NAME_MAX_LEN,
    )
    password: str | None = Field(
        default=None,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
    )
    is_active: bool | None = None

    @field_validator("user_name")
    @classmethod
    def validate_user_name(cls, v: str | None) -> str | None:
        return v if v is None else reject_whitespace(v, "user_name")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        return v if v is None else reject_whitespace(v, "password")


class AccountPasswordUpdate(BaseModel):
    user_name: str = _user_name_field()
    new_password: str = _password_field("New password")
    updated_by: str | None = Field(default=None, min_length=1, max_length=ACTOR_MAX_LEN)

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        return reject_whitespace(v, "new_password")


class AccountUserNameUpdate(BaseModel):
    old_user_name: str = _user_name_field("Current user name")
    new_user_name: str = _user_name_field("New user name")
    updated_by: str | None = Field(default=None, min_length=1, max_length=ACTOR_MAX_LEN)

    @field_validator("new_user_name")
    @classmethod
    def validate_new_user_name(cls, v: str) -> str:
        return reject_whitespace(v, "new_user_name")


class AccountResponse(AuditResponse):
    user_name: str
