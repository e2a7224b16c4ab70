"""SQLAlchemy ORM models for the permission graph."""

from auth_service.models.account import Account
from auth_service.models.account_claim_action import AccountClaimAction
from auth_service.models.action import Action
from auth_service.models.application import Application
from auth_service.models.application_claim import ApplicationClaim
from auth_service.models.base import AuditMixin, Base
from auth_service.models.claim import Claim, ClaimType
from auth_service.models.claim_action import ClaimAction

__all__ = [
    "Account",
    "AccountClaimAction",
    "Action",
    "Application",
    "ApplicationClaim",
    "AuditMixin",
    "Base",
    "Claim",
    "ClaimAction",
    "ClaimType",
]
