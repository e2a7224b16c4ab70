"""Unit tests for request validation in auth_service.schemas."""

import unittest

import pydantic

from auth_service.mapping import PayloadMapper
from auth_service.models import ClaimType
from auth_service.schemas import (
    AccountClaimActionCreate,
    AccountClaimActionUpdate,
    AccountCreate,
    AccountUpdate,
    ActionCreate,
    ActionUpdate,
    ClaimActionUpdate,
    ClaimCreate,
    ClaimUpdate,
    LoginRequest,
)


class TestAccountCreate(unittest.TestCase):
    def test_valid(self) -> None:
        payload = AccountCreate(user_name="alice01", password="Secr3t!", created_by="admin")
        self.assertEqual(payload.user_name, "alice01")

    def test_user_name_too_short(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountCreate(user_name="al", password="Secr3t!", created_by="admin")

    def test_user_name_too_long(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountCreate(user_name="a" * 51, password="Secr3t!", created_by="admin")

    def test_user_name_with_space(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountCreate(user_name="alice 01", password="Secr3t!", created_by="admin")

    def test_password_with_space(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountCreate(user_name="alice01", password="Secr 3t!", created_by="admin")

    def test_created_by_required(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountCreate(user_name="alice01", password="Secr3t!")

    def test_created_by_too_long(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountCreate(user_name="alice01", password="Secr3t!", created_by="x" * 101)


class TestAccountUpdate(unittest.TestCase):
    def test_changes_contain_only_sent_fields(self) -> None:
        payload = AccountUpdate(is_active=False, updated_by="admin", version=3)
        self.assertEqual(PayloadMapper().changes(payload), {"is_active": False})

    def test_version_must_be_positive(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountUpdate(version=0)

    def test_explicit_null_user_name_is_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountUpdate.model_validate({"user_name": None})

    def test_explicit_null_is_active_is_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountUpdate.model_validate({"is_active": None})

    def test_null_password_keeps_stored_credential(self) -> None:
        payload = AccountUpdate.model_validate({"password": None})
        self.assertEqual(PayloadMapper().changes(payload), {"password": None})


class TestExplicitNullsOnUpdate(unittest.TestCase):
    def test_claim_type_and_value(self) -> None:
        for field in ("type", "value", "is_active"):
            with self.subTest(field=field), self.assertRaises(pydantic.ValidationError):
                ClaimUpdate.model_validate({field: None})

    def test_claim_description_can_be_cleared(self) -> None:
        payload = ClaimUpdate.model_validate({"description": None})
        self.assertEqual(PayloadMapper().changes(payload), {"description": None})

    def test_action_name(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            ActionUpdate.model_validate({"name": None})

    def test_pair_and_grant_ids(self) -> None:
        cases = [
            (ClaimActionUpdate, "id_claim"),
            (ClaimActionUpdate, "id_action"),
            (AccountClaimActionUpdate, "id_account"),
            (AccountClaimActionUpdate, "id_claim_action"),
        ]
        for schema, field in cases:
            with self.subTest(schema=schema.__name__, field=field), self.assertRaises(pydantic.ValidationError):
                schema.model_validate({field: None})

    def test_omitted_fields_are_fine(self) -> None:
        payload = ClaimActionUpdate.model_validate({"is_active": False})
        self.assertEqual(PayloadMapper().changes(payload), {"is_active": False})


class TestClaimCreate(unittest.TestCase):
    def test_type_from_value(self) -> None:
        payload = ClaimCreate(type="Role", value="Manager", created_by="admin")
        self.assertEqual(payload.type, ClaimType.ROLE)

    def test_unknown_type(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            ClaimCreate(type="Group", value="Manager", created_by="admin")

    def test_blank_value(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            ClaimCreate(type="Role", value="   ", created_by="admin")

    def test_description_limit(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            ClaimCreate(type="Role", value="Manager", description="d" * 256, created_by="admin")


class TestActionCreate(unittest.TestCase):
    def test_name_without_spaces(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            ActionCreate(name="Read All", created_by="admin")

    def test_name_limit(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            ActionCreate(name="a" * 51, created_by="admin")


class TestIds(unittest.TestCase):
    def test_ids_must_be_positive(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            AccountClaimActionCreate(id_account=0, id_claim_action=1, created_by="admin")


class TestLoginRequest(unittest.TestCase):
    def test_password_too_long(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            LoginRequest(user_name="alice01", password="p" * 51)


if __name__ == "__main__":
    unittest.main()
