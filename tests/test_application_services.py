"""Store-backed tests for application and application-claim services."""

import unittest

from auth_service.core.errors import ConflictError, NotFoundError
from auth_service.models import Application, ApplicationClaim, Claim, ClaimType
from auth_service.services.application import ApplicationService
from auth_service.services.application_claim import ApplicationClaimService
from auth_service.services.claim import ClaimService
from support import ACTOR, StoreTestCase


class ApplicationServicesTestCase(StoreTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.applications = ApplicationService(self.uow)
        self.links = ApplicationClaimService(self.uow)
        self.claims = ClaimService(self.uow)

    def _application(self, name: str = "Billing") -> Application:
        return self.applications.add_application(Application(name=name, description="Billing portal"), ACTOR)

    def _claim(self, value: str = "Invoice") -> Claim:
        return self.claims.add_claim(Claim(type=ClaimType.PERMISSION, value=value), ACTOR)

    def _link(self, application: Application, claim: Claim) -> ApplicationClaim:
        link = ApplicationClaim(id_application=application.id, id_claim=claim.id)
        return self.links.add_application_claim(link, ACTOR)


class TestApplicationService(ApplicationServicesTestCase):
    def test_add_and_lookup_by_name(self) -> None:
        application = self._application()
        self.assertEqual(self.applications.get_by_name("Billing").id, application.id)
        self.assertEqual(application.created_by, ACTOR)
        self.assertEqual(application.version, 1)

    def test_duplicate_live_name_conflicts(self) -> None:
        self._application()
        with self.assertRaises(ConflictError):
            self._application()

    def test_name_reusable_after_delete(self) -> None:
        first = self._application()
        self.applications.delete_application(first.id, ACTOR)
        second = self._application()
        self.assertNotEqual(first.id, second.id)

    def test_update_description(self) -> None:
        application = self._application()
        updated = self.applications.update_application(application.id, {"description": "Payments"}, "admin")
        self.assertEqual(updated.description, "Payments")
        self.assertEqual(updated.updated_by, "admin")
        self.assertEqual(updated.version, 2)

    def test_stale_version_conflicts(self) -> None:
        application = self._application()
        with self.assertRaises(ConflictError):
            self.applications.update_application(application.id, {"is_active": False}, ACTOR, expected_version=5)

    def test_lookup_missing_name(self) -> None:
        with self.assertRaises(NotFoundError):
            self.applications.get_by_name("Nothing")


class TestApplicationClaimService(ApplicationServicesTestCase):
    def test_link_and_lookups(self) -> None:
        application = self._application()
        claim = self._claim()
        link = self._link(application, claim)
        self.assertEqual([row.id for row in self.links.get_by_application_id(application.id)], [link.id])
        self.assertEqual([row.id for row in self.links.get_by_claim_id(claim.id)], [link.id])
        self.assertEqual(self.links.get_by_application_and_claim(application.id, claim.id).id, link.id)

    def test_duplicate_link_conflicts(self) -> None:
        application = self._application()
        claim = self._claim()
        self._link(application, claim)
        with self.assertRaises(ConflictError):
            self._link(application, claim)

    def test_missing_parent_not_found(self) -> None:
        application = self._application()
        with self.assertRaises(NotFoundError):
            self.links.add_application_claim(ApplicationClaim(id_application=application.id, id_claim=999), ACTOR)

    def test_repoint_to_deleted_claim_not_found(self) -> None:
        application = self._application()
        link = self._link(application, self._claim("Invoice"))
        gone = self._claim("Report")
        self.claims.delete_claim(gone.id, ACTOR)
        with self.assertRaises(NotFoundError):
            self.links.update_application_claim(link.id, {"id_claim": gone.id}, ACTOR)

    def test_inactive_link_hidden_from_lookups(self) -> None:
        application = self._application()
        link = self._link(application, self._claim())
        self.links.update_application_claim(link.id, {"is_active": False}, ACTOR)
        self.assertEqual(self.links.get_by_application_id(application.id), [])

    def test_application_delete_cascades_to_links(self) -> None:
        application = self._application()
        link = self._link(application, self._claim())
        self.applications.delete_application(application.id, "admin")
        stored = self.links.get_by_id(link.id)
        self.assertIsNotNone(stored.dt_deleted)
        self.assertEqual(stored.deleted_by, "admin")

    def test_claim_delete_cascades_to_links(self) -> None:
        application = self._application()
        claim = self._claim()
        link = self._link(application, claim)
        self.claims.delete_claim(claim.id, ACTOR)
        self.assertTrue(self.links.get_by_id(link.id).is_deleted)
        with self.assertRaises(NotFoundError):
            self.links.get_by_application_and_claim(application.id, claim.id)
        # A fresh link to a new claim with the same value is allowed.
        self._link(application, self._claim())


if __name__ == "__main__":
    unittest.main()
