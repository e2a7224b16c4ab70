"""Store-backed tests for claim, action, claim-action and grant services."""

import unittest

from auth_service.core.errors import ConflictError, NotFoundError
from auth_service.models import AccountClaimAction, Action, Claim, ClaimAction, ClaimType
from auth_service.services.account_claim_action import AccountClaimActionService
from auth_service.services.action import ActionService
from auth_service.services.claim import ClaimService
from auth_service.services.claim_action import ClaimActionService
from support import ACTOR, StoreTestCase


class PermissionServicesTestCase(StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.claims = ClaimService(self.uow)
        self.actions = ActionService(self.uow)
        self.claim_actions = ClaimActionService(self.uow)
        self.grants = AccountClaimActionService(self.uow)

    def _claim(self, value: str = "Invoice") -> Claim:
        return self.claims.add_claim(Claim(type=ClaimType.PERMISSION, value=value, description="Invoices"), ACTOR)

    def _action(self, name: str = "Delete") -> Action:
        return self.actions.add_action(Action(name=name), ACTOR)


class TestClaimService(PermissionServicesTestCase):
    def test_add_and_lookup_by_value(self) -> None:
        claim = self._claim()
        self.assertEqual(self.claims.get_by_value("Invoice").id, claim.id)
        self.assertEqual(claim.type, ClaimType.PERMISSION)

    def test_lookup_missing_value(self) -> None:
        with self.assertRaises(NotFoundError):
            self.claims.get_by_value("Nothing")

    def test_update_description(self) -> None:
        claim = self._claim()
        updated = self.claims.update_claim(claim.id, {"description": "All invoices"}, "admin")
        self.assertEqual(updated.description, "All invoices")
        self.assertEqual(updated.updated_by, "admin")

    def test_delete_hides_from_active(self) -> None:
        claim = self._claim()
        self.claims.delete_claim(claim.id, ACTOR)
        self.assertEqual(self.claims.get_all_active(), [])
        with self.assertRaises(NotFoundError):
            self.claims.get_by_value("Invoice")


class TestActionService(PermissionServicesTestCase):
    def test_add_and_lookup_by_name(self) -> None:
        action = self._action("Read")
        self.assertEqual(self.actions.get_by_name("Read").id, action.id)

    def test_update_missing_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.actions.update_action(999, {"name": "Write"}, ACTOR)

    def test_delete_cascades_to_claim_actions(self) -> None:
        claim = self._claim()
        action = self._action()
        claim_action = self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)
        self.actions.delete_action(action.id, ACTOR)
        self.assertIsNotNone(self.claim_actions.get_by_id(claim_action.id).dt_deleted)
        self.assertEqual(self.claim_actions.get_all_active(), [])


class TestClaimActionService(PermissionServicesTestCase):
    def test_pair_and_lookup(self) -> None:
        claim = self._claim()
        action = self._action()
        added = self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)
        found = self.claim_actions.get_by_claim_and_action(claim.id, action.id)
        self.assertEqual(found.id, added.id)
        self.assertEqual(found.claim.value, "Invoice")
        self.assertEqual(found.action.name, "Delete")

    def test_duplicate_pair_conflicts(self) -> None:
        claim = self._claim()
        action = self._action()
        self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)
        with self.assertRaises(ConflictError):
            self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)

    def test_missing_parent_not_found(self) -> None:
        claim = self._claim()
        with self.assertRaises(NotFoundError):
            self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=999), ACTOR)

    def test_deleted_parent_not_found(self) -> None:
        claim = self._claim()
        action = self._action()
        self.actions.delete_action(action.id, ACTOR)
        with self.assertRaises(NotFoundError):
            self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)

    def test_unknown_pair_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.claim_actions.get_by_claim_and_action(1, 1)


class TestAccountClaimActionService(PermissionServicesTestCase):
    def test_grant_round_trip(self) -> None:
        account = self.seed_account()
        claim = self._claim()
        action = self._action()
        claim_action = self.claim_actions.add_claim_action(ClaimAction(id_claim=claim.id, id_action=action.id), ACTOR)
        grant = self.grants.add_account_claim_action(
            AccountClaimAction(id_account=account.id, id_claim_action=claim_action.id), ACTOR
        )

        uow = self.fresh_uow()
        grants = AccountClaimActionService(uow).get_by_id_account(account.id)
        self.assertEqual([g.id for g in grants], [grant.id])
        self.assertEqual(grants[0].claim_action.claim.value, "Invoice")
        self.assertEqual(grants[0].claim_action.action.name, "Delete")

    def test_duplicate_grant_conflicts(self) -> None:
        account = self.seed_account()
        claim_action = self.seed_claim_action()
        grant = AccountClaimAction(id_account=account.id, id_claim_action=claim_action.id)
        self.grants.add_account_claim_action(grant, ACTOR)
        with self.assertRaises(ConflictError):
            self.grants.add_account_claim_action(
                AccountClaimAction(id_account=account.id, id_claim_action=claim_action.id), ACTOR
            )

    def test_revoked_grant_can_be_granted_again(self) -> None:
        account = self.seed_account()
        claim_action = self.seed_claim_action()
        first = self.grants.add_account_claim_action(
            AccountClaimAction(id_account=account.id, id_claim_action=claim_action.id), ACTOR
        )
        self.grants.delete_account_claim_action(first.id, ACTOR)
        second = self.grants.add_account_claim_action(
            AccountClaimAction(id_account=account.id, id_claim_action=claim_action.id), ACTOR
        )
        found = self.grants.get_by_account_and_claim_action(account.id, claim_action.id)
        self.assertEqual(found.id, second.id)

    def test_grant_to_missing_account_not_found(self) -> None:
        claim_action = self.seed_claim_action()
        with self.assertRaises(NotFoundError):
            self.grants.add_account_claim_action(AccountClaimAction(id_account=999, id_claim_action=claim_action.id), ACTOR)

    def test_claim_delete_drops_permission_from_account(self) -> None:
        account = self.seed_account()
        claim_action = self.seed_claim_action()
        self.seed_grant(account, claim_action)
        self.claims.delete_claim(claim_action.id_claim, ACTOR)
        self.assertEqual(self.grants.get_by_id_account(account.id), [])
        self.assertEqual(self.grants.get_by_id_claim_action(claim_action.id), [])


if __name__ == "__main__":
    unittest.main()
