"""
Account service: authentication, account lifecycle, credential changes and token issuance.

Passwords enter as plaintext and leave this module only as Argon2id hashes.
"""

import logging
from collections.abc import Iterable
from typing import Any

from starlette.concurrency import run_in_threadpool

from auth_service.core.errors import NotFoundError, UnauthorizedError
from auth_service.core.security import CredentialHasher, Token, TokenIssuer
from auth_service.models import Account
from auth_service.services.common import found, live, require_actor
from auth_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

DUPLICATE_USER_NAME = "User name is already taken."


class AccountService:
    def __init__(self, uow: UnitOfWork, hasher: CredentialHasher, token_issuer: TokenIssuer) -> None:
        self.uow = uow
        self.hasher = hasher
        self.token_issuer = token_issuer

    # Queries

    def get_all(self) -> list[Account]:
        return self.uow.accounts.get_all()

    def get_all_active(self) -> list[Account]:
        return self.uow.accounts.get_all_active()

    def get_by_id(self, account_id: int) -> Account:
        """Direct lookup by id; soft-deleted accounts are returned too."""
        return found(self.uow.accounts.get_by_id(account_id), "Account", account_id)

    def get_by_ids(self, account_ids: Iterable[int]) -> list[Account]:
        return self.uow.accounts.get_by_ids(account_ids)

    def get_by_user_name(self, user_name: str) -> Account:
        return found(self.uow.accounts.get_by_user_name(user_name), "Account", user_name)

    async def get_by_user_name_async(self, user_name: str) -> Account:
        account = await self.uow.accounts.get_by_user_name_async(user_name)
        return found(account, "Account", user_name)

    # Authentication

    def authenticate(self, user_name: str, password: str) -> Account:
        """
        Verify credentials and return the account. Read-only.

        Raises NotFoundError when no live account has this user name, and
        UnauthorizedError when the account is deactivated or the password does
        not match the stored hash.
        """
        account = self.uow.accounts.get_by_user_name(user_name)
        if account is None:
            logger.info("Authentication failed", extra={"user_name": user_name, "reason": "not_found"})
            raise NotFoundError("Account not found.", details={"user_name": user_name})
        if not account.is_active:
            logger.info("Authentication failed", extra={"user_name": user_name, "reason": "inactive"})
            raise UnauthorizedError("Account is disabled.")
        if not self.hasher.verify(password, account.password):
            logger.info("Authentication failed", extra={"user_name": user_name, "reason": "bad_password"})
            raise UnauthorizedError("Invalid password.")
        return account

    def generate_token(self, user_name: str, password: str) -> Token:
        """Authenticate, then issue a token carrying the account's live permissions."""
        account = self.authenticate(user_name, password)
        grants = self.uow.account_claim_actions.get_by_id_account(account.id)
        token = self.token_issuer.issue(account, grants)
        logger.info(
            "Token issued",
            extra={"user_name": account.user_name, "permissions": len(grants)},
        )
        return token

    async def generate_token_async(self, user_name: str, password: str) -> Token:
        return await run_in_threadpool(self.generate_token, user_name, password)

    # Mutations

    def add_account(self, account: Account, actor: str) -> Account:
        """Hash the plaintext password on account and persist it. Duplicate user name -> ConflictError."""
        actor = require_actor(actor)
        account.password = self.hasher.hash(account.password)
        added = self.uow.execute_in_transaction(
            lambda: self.uow.accounts.add(account, actor),
            conflict_message=DUPLICATE_USER_NAME,
        )
        logger.info("Account created", extra={"account_id": added.id, "actor": actor})
        return added

    def add_accounts(self, accounts: Iterable[Account], actor: str) -> list[Account]:
        actor = require_actor(actor)
        pending = list(accounts)
        for account in pending:
            account.password = self.hasher.hash(account.password)
        return self.uow.execute_in_transaction(
            lambda: self.uow.accounts.add_range(pending, actor),
            conflict_message=DUPLICATE_USER_NAME,
        )

    def update_account(
        self,
        account_id: int,
        changes: dict[str, Any],
        actor: str,
        expected_version: int | None = None,
    ) -> Account:
        """
        Update user_name / is_active and, only when a new password is supplied, the credential.

        A missing or None password keeps the stored hash.
        """
        actor = require_actor(actor)
        changes = dict(changes)
        password = changes.pop("password", None)
        if password is not None:
            changes["password"] = self.hasher.hash(password)

        def _update() -> Account:
            account = self.uow.accounts.update(account_id, changes, actor, expected_version)
            return live(account, "Account", account_id)

        return self.uow.execute_in_transaction(_update, conflict_message=DUPLICATE_USER_NAME)

    def update_account_password(self, user_name: str, new_password: str, actor: str) -> Account:
        actor = require_actor(actor)
        password_hash = self.hasher.hash(new_password)

        def _update() -> Account:
            account = self.uow.accounts.update_password(user_name, password_hash, actor)
            return found(account, "Account", user_name)

        account = self.uow.execute_in_transaction(_update)
        logger.info("Account password changed", extra={"account_id": account.id, "actor": actor})
        return account

    def update_account_user_name(self, old_user_name: str, new_user_name: str, actor: str) -> Account:
        actor = require_actor(actor)

        def _update() -> Account:
            account = self.uow.accounts.update_user_name(old_user_name, new_user_name, actor)
            return found(account, "Account", old_user_name)

        return self.uow.execute_in_transaction(_update, conflict_message=DUPLICATE_USER_NAME)

    def delete_account(self, account_id: int, actor: str) -> Account:
        """Soft delete the account and its grants."""
        actor = require_actor(actor)

        def _delete() -> Account:
            account = live(self.uow.accounts.get_by_id(account_id), "Account", account_id)
            self.uow.accounts.remove(account, actor)
            return account

        account = self.uow.execute_in_transaction(_delete)
        logger.info("Account deleted", extra={"account_id": account_id, "actor": actor})
        return account

    def delete_account_by_user_name(self, user_name: str, actor: str) -> Account:
        actor = require_actor(actor)

        def _delete() -> Account:
            account = self.uow.accounts.delete_by_user_name(user_name, actor)
            return found(account, "Account", user_name)

        return self.uow.execute_in_transaction(_delete)

    def delete_accounts_by_user_names(self, user_names: Iterable[str], actor: str) -> int:
        actor = require_actor(actor)
        names = list(user_names)
        return self.uow.execute_in_transaction(
            lambda: self.uow.accounts.delete_by_user_names(names, actor)
        )
