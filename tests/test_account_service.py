"""Store-backed tests for AccountService: authentication, credential changes, tokens and soft delete."""

import asyncio
import unittest

from auth_service.core.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from auth_service.models import Account
from auth_service.services.account import AccountService
from support import ACTOR, TEST_HASHER, TEST_ISSUER, StoreTestCase


class AccountServiceTestCase(StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.service = AccountService(self.uow, TEST_HASHER, TEST_ISSUER)

    def _add(self, user_name: str = "alice01", password: str = "Secr3t!") -> Account:
        return self.service.add_account(Account(user_name=user_name, password=password), ACTOR)


class TestAddAccount(AccountServiceTestCase):
    def test_stores_hash_not_plaintext(self) -> None:
        account = self._add()
        self.assertNotEqual(account.password, "Secr3t!")
        self.assertTrue(TEST_HASHER.verify("Secr3t!", account.password))

    def test_stamps_audit_fields(self) -> None:
        account = self._add()
        self.assertIsNotNone(account.id)
        self.assertTrue(account.is_active)
        self.assertIsNotNone(account.dt_created)
        self.assertEqual(account.created_by, ACTOR)
        self.assertIsNone(account.dt_deleted)
        self.assertEqual(account.version, 1)

    def test_duplicate_user_name_conflicts(self) -> None:
        self._add()
        with self.assertRaises(ConflictError):
            self._add(password="Other99!")
        self.assertEqual(len(self.service.get_all()), 1)

    def test_blank_actor_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.service.add_account(Account(user_name="alice01", password="Secr3t!"), "  ")

    def test_add_accounts_is_all_or_nothing(self) -> None:
        self._add("carol01")
        batch = [Account(user_name="dave001", password="Secr3t!"), Account(user_name="carol01", password="x12345")]
        with self.assertRaises(ConflictError):
            self.service.add_accounts(batch, ACTOR)
        self.assertEqual([a.user_name for a in self.service.get_all()], ["carol01"])


class TestAuthenticate(AccountServiceTestCase):
    def test_correct_password_returns_account(self) -> None:
        added = self._add()
        account = self.service.authenticate("alice01", "Secr3t!")
        self.assertEqual(account.id, added.id)

    def test_wrong_password_unauthorized(self) -> None:
        self._add()
        with self.assertRaises(UnauthorizedError):
            self.service.authenticate("alice01", "wrong!!")

    def test_unknown_user_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.service.authenticate("nobody1", "Secr3t!")

    def test_deactivated_account_unauthorized(self) -> None:
        account = self._add()
        self.service.update_account(account.id, {"is_active": False}, ACTOR)
        with self.assertRaises(UnauthorizedError):
            self.service.authenticate("alice01", "Secr3t!")

    def test_soft_deleted_account_not_found(self) -> None:
        account = self._add()
        self.service.delete_account(account.id, ACTOR)
        with self.assertRaises(NotFoundError):
            self.service.authenticate("alice01", "Secr3t!")

    def test_authenticate_does_not_write(self) -> None:
        account = self._add()
        self.service.authenticate("alice01", "Secr3t!")
        self.assertIsNone(account.dt_updated)
        self.assertEqual(account.version, 1)


class TestPasswordChange(AccountServiceTestCase):
    def test_old_password_stops_working(self) -> None:
        self._add()
        self.service.update_account_password("alice01", "NewPass1", ACTOR)
        with self.assertRaises(UnauthorizedError):
            self.service.authenticate("alice01", "Secr3t!")
        self.assertEqual(self.service.authenticate("alice01", "NewPass1").user_name, "alice01")

    def test_unknown_user_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.service.update_account_password("nobody1", "NewPass1", ACTOR)

    def test_stamps_update(self) -> None:
        self._add()
        account = self.service.update_account_password("alice01", "NewPass1", "admin")
        self.assertEqual(account.updated_by, "admin")
        self.assertIsNotNone(account.dt_updated)
        self.assertEqual(account.version, 2)


class TestUpdateAccount(AccountServiceTestCase):
    def test_without_password_keeps_hash(self) -> None:
        account = self._add()
        stored = account.password
        self.service.update_account(account.id, {"user_name": "alice02", "password": None}, ACTOR)
        self.assertEqual(self.service.get_by_id(account.id).password, stored)
        self.assertTrue(self.service.authenticate("alice02", "Secr3t!"))

    def test_with_password_rehashes(self) -> None:
        account = self._add()
        self.service.update_account(account.id, {"password": "NewPass1"}, ACTOR)
        self.service.authenticate("alice01", "NewPass1")

    def test_stale_version_conflicts(self) -> None:
        account = self._add()
        self.service.update_account(account.id, {"user_name": "alice02"}, ACTOR, expected_version=1)
        with self.assertRaises(ConflictError):
            self.service.update_account(account.id, {"user_name": "alice03"}, ACTOR, expected_version=1)
        self.assertEqual(self.service.get_by_id(account.id).user_name, "alice02")

    def test_rename_to_taken_name_conflicts(self) -> None:
        self._add("alice01")
        self._add("bobby01")
        with self.assertRaises(ConflictError):
            self.service.update_account_user_name("bobby01", "alice01", ACTOR)

    def test_rename(self) -> None:
        self._add()
        self.service.update_account_user_name("alice01", "alice99", ACTOR)
        with self.assertRaises(NotFoundError):
            self.service.get_by_user_name("alice01")
        self.assertEqual(self.service.get_by_user_name("alice99").user_name, "alice99")

    def test_missing_account_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.service.update_account(404, {"is_active": False}, ACTOR)


class TestDeleteAccount(AccountServiceTestCase):
    def test_soft_delete_keeps_row(self) -> None:
        account = self._add()
        deleted = self.service.delete_account(account.id, "admin")
        self.assertFalse(deleted.is_active)
        self.assertIsNotNone(deleted.dt_deleted)
        self.assertEqual(deleted.deleted_by, "admin")
        self.assertEqual(self.service.get_all_active(), [])
        self.assertEqual(self.service.get_by_id(account.id).id, account.id)

    def test_deleted_user_name_can_be_registered_again(self) -> None:
        first = self._add()
        self.service.delete_account(first.id, ACTOR)
        second = self._add(password="NewPass1")
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(self.service.authenticate("alice01", "NewPass1").id, second.id)

    def test_delete_twice_not_found(self) -> None:
        account = self._add()
        self.service.delete_account(account.id, ACTOR)
        with self.assertRaises(NotFoundError):
            self.service.delete_account(account.id, ACTOR)

    def test_delete_by_user_names_counts_live_accounts(self) -> None:
        self._add("alice01")
        self._add("bobby01")
        removed = self.service.delete_accounts_by_user_names(["alice01", "bobby01", "nobody1"], ACTOR)
        self.assertEqual(removed, 2)
        self.assertEqual(self.service.get_all_active(), [])

    def test_delete_cascades_to_grants(self) -> None:
        account = self._add()
        grant = self.seed_grant(account, self.seed_claim_action())
        self.service.delete_account(account.id, ACTOR)
        self.assertIsNotNone(self.uow.account_claim_actions.get_by_id(grant.id).dt_deleted)


class TestGenerateToken(AccountServiceTestCase):
    def test_token_lists_granted_permissions(self) -> None:
        account = self._add()
        self.seed_grant(account, self.seed_claim_action("Invoice", "Delete"))
        self.seed_grant(account, self.seed_claim_action("Report", "Read"))
        token = self.service.generate_token("alice01", "Secr3t!")
        payload = TEST_ISSUER.decode(token.access_token)
        self.assertEqual(payload["permission"], ["Invoice:Delete", "Report:Read"])
        self.assertEqual(payload["sub"], "alice01")

    def test_wrong_password_issues_nothing(self) -> None:
        self._add()
        with self.assertRaises(UnauthorizedError):
            self.service.generate_token("alice01", "wrong!!")

    def test_async_variant(self) -> None:
        self._add()
        token = asyncio.run(self.service.generate_token_async("alice01", "Secr3t!"))
        self.assertEqual(token.user_name, "alice01")
        account = asyncio.run(self.service.get_by_user_name_async("alice01"))
        self.assertEqual(account.user_name, "alice01")


if __name__ == "__main__":
    unittest.main()
