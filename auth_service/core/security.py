"""Argon2id password hashing and JWT issuance/verification for authentication."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import jwt
from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from auth_service.core.config import Settings, get_settings

if TYPE_CHECKING:
    from auth_service.models import Account, AccountClaimAction

# Claim name carrying "<claim value>:<action name>" entries in issued tokens.
PERMISSION_CLAIM = "permission"

# Min/max lengths for user name and password validation.
USER_NAME_MIN_LEN = 6
USER_NAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 50
PASSWORD_HASH_MAX_LEN = 128


class CredentialHasher:
    """
    One-way password hashing with Argon2id.

    Hashes are PHC strings ($argon2id$v=19$m=...,t=...,p=...$salt$digest): the
    salt and the cost parameters travel with the hash, so verification needs
    nothing but the stored string.
    """

    def __init__(self, time_cost: int, memory_cost: int, parallelism: int) -> None:
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=32,
            salt_len=16,
            type=Type.ID,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialHasher":
        return cls(
            time_cost=settings.ARGON2_TIME_COST,
            memory_cost=settings.ARGON2_MEMORY_COST,
            parallelism=settings.ARGON2_PARALLELISM,
        )

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Do not store plain passwords."""
        return self._hasher.hash(plain_password)

    def verify(self, plain_password: str, hashed: str) -> bool:
        """Verify a plain password against a stored hash; False on mismatch or malformed hash."""
        try:
            return self._hasher.verify(hashed, plain_password)
        except (VerificationError, InvalidHashError, TypeError, ValueError):
            return False


@dataclass(frozen=True)
class Token:
    """Signed access token issued after a successful authentication. Never persisted."""

    access_token: str
    expiration: datetime
    user_name: str


def permissions_from_grants(grants: Iterable["AccountClaimAction"]) -> list[str]:
    """Flatten grants into sorted, de-duplicated "<claim value>:<action name>" strings."""
    permissions = {
        f"{grant.claim_action.claim.value}:{grant.claim_action.action.name}"
        for grant in grants
    }
    return sorted(permissions)


class TokenIssuer:
    """Builds and validates HMAC-signed JWTs carrying account identity and permission claims."""

    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        algorithm: str = "HS256",
        expire_hours: int = 1,
    ) -> None:
        self._secret = secret
        self.issuer = issuer
        self.audience = audience
        self.algorithm = algorithm
        self.expire_hours = expire_hours

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            algorithm=settings.JWT_ALGORITHM,
            expire_hours=settings.JWT_EXPIRE_HOURS,
        )

    def issue(self, account: "Account", grants: Iterable["AccountClaimAction"]) -> Token:
        """Create a token with sub/name (user name), uid, permission list, iss, aud, iat and exp."""
        now = datetime.now(UTC)
        expire = now + timedelta(hours=self.expire_hours)
        payload: dict[str, Any] = {
            "sub": account.user_name,
            "name": account.user_name,
            "uid": account.id,
            PERMISSION_CLAIM: permissions_from_grants(grants),
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "exp": expire,
        }
        access_token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        return Token(access_token=access_token, expiration=expire, user_name=account.user_name)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token (signature, exp, iss, aud); return its payload.
        Raises jwt.PyJWTError on invalid or expired token.
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self.algorithm],
            audience=self.audience,
            issuer=self.issuer,
        )


@lru_cache
def get_credential_hasher() -> CredentialHasher:
    """Return the hasher configured from settings (safe to call from dependencies)."""
    return CredentialHasher.from_settings(get_settings())


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Return the token issuer configured from settings (safe to call from dependencies)."""
    return TokenIssuer.from_settings(get_settings())
