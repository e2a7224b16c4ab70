"""Shared builders for store-backed tests: a fresh SQLite in-memory database per test."""

import unittest

from auth_service.core.database import (
    IN_MEMORY_DATABASE_URL,
    build_engine,
    build_session_factory,
    create_schema,
)
from auth_service.core.security import CredentialHasher, TokenIssuer
from auth_service.models import Account, AccountClaimAction, Action, Claim, ClaimAction, ClaimType
from auth_service.unit_of_work import UnitOfWork

# Lowest Argon2 cost the library accepts; keeps hashing fast in tests.
TEST_HASHER = CredentialHasher(time_cost=1, memory_cost=8, parallelism=1)
TEST_ISSUER = TokenIssuer(
    secret="test-secret-that-is-long-enough-for-hs256",
    issuer="auth-service",
    audience="auth-service-clients",
)
ACTOR = "tester"


class StoreTestCase(unittest.TestCase):
    """Each test gets its own in-memory database with the full schema."""

    def setUp(self) -> None:
        self.engine = build_engine(IN_MEMORY_DATABASE_URL)
        create_schema(self.engine)
        self.session_factory = build_session_factory(self.engine)
        self.uow = UnitOfWork(self.session_factory)

    def tearDown(self) -> None:
        self.uow.close()
        self.engine.dispose()

    def fresh_uow(self) -> UnitOfWork:
        """Close the current unit of work and open a new one (nothing cached in the identity map)."""
        self.uow.close()
        self.uow = UnitOfWork(self.session_factory)
        return self.uow

    def seed_account(self, user_name: str = "alice01", password: str = "Secr3t!") -> Account:
        account = Account(user_name=user_name, password=TEST_HASHER.hash(password))
        return self.uow.execute_in_transaction(lambda: self.uow.accounts.add(account, ACTOR))

    def seed_claim_action(self, value: str = "Invoice", action_name: str = "Delete") -> ClaimAction:
        def _seed() -> ClaimAction:
            claim = self.uow.claims.add(Claim(type=ClaimType.PERMISSION, value=value), ACTOR)
            action = self.uow.actions.add(Action(name=action_name), ACTOR)
            return self.uow.claim_actions.add(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)

        return self.uow.execute_in_transaction(_seed)

    def seed_grant(self, account: Account, claim_action: ClaimAction) -> AccountClaimAction:
        grant = AccountClaimAction(id_account=account.id, id_claim_action=claim_action.id)
        return self.uow.execute_in_transaction(lambda: self.uow.account_claim_actions.add(grant, ACTOR))
