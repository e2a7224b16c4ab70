"""Service-layer error taxonomy, translated to HTTP status codes at the boundary."""

from typing import Any


class AuthServiceError(Exception):
    """Base error for the service layer; carries the HTTP status the boundary should use."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(AuthServiceError):
    """Lookup by user name, id or value yields no row."""

    status_code = 404


class UnauthorizedError(AuthServiceError):
    """Password verification failed or the account may not sign in."""

    status_code = 401


class ConflictError(AuthServiceError):
    """Uniqueness or optimistic-concurrency violation."""

    status_code = 409


class ValidationError(AuthServiceError):
    """Malformed input the service refuses to act on."""

    status_code = 422


class StorageError(AuthServiceError):
    """Underlying persistence failure not otherwise classified."""

    status_code = 500

    def __init__(
        self,
        message: str = "A storage error occurred.",
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message, details)
