"""Per-entity repositories over the permission graph store."""

from auth_service.repositories.account import AccountRepository
from auth_service.repositories.account_claim_action import AccountClaimActionRepository
from auth_service.repositories.action import ActionRepository
from auth_service.repositories.application import ApplicationRepository
from auth_service.repositories.application_claim import ApplicationClaimRepository
from auth_service.repositories.base import AuditedRepository, soft_delete
from auth_service.repositories.claim import ClaimRepository
from auth_service.repositories.claim_action import ClaimActionRepository

__all__ = [
    "AccountClaimActionRepository",
    "AccountRepository",
    "ActionRepository",
    "ApplicationClaimRepository",
    "ApplicationRepository",
    "AuditedRepository",
    "ClaimActionRepository",
    "ClaimRepository",
    "soft_delete",
]
