import unittest
from decimal import Decimal

from exceptions import ApplicantNotFoundError, DuplicateApplicantError
from services.applicants import create_applicant, get_applicant, update_applicant
from support import DatabaseTestCase, applicant_fields


class TestApplicants(DatabaseTestCase):
    async def test_create_sets_created_at(self):
        applicant = await create_applicant(self.session, "A2001", **applicant_fields())
        await self.session.commit()
        self.assertEqual(applicant.id, "A2001")
        self.assertIsNotNone(applicant.created_at)

        loaded = await get_applicant(self.session, "A2001")
        self.assertEqual(loaded.salary, Decimal("1000.00"))
        self.assertEqual(loaded.credit_score, 650)

    async def test_duplicate_id_rejected(self):
        await create_applicant(self.session, "A2001", **applicant_fields())
        await self.session.commit()
        # A second request gets its own session, as under the API
        async with self.session_factory() as other:
            with self.assertRaises(DuplicateApplicantError):
                await create_applicant(other, "A2001", **applicant_fields(name="Someone Else"))
            loaded = await get_applicant(other, "A2001")
            self.assertEqual(loaded.name, "Arjun Mehta")

    async def test_unknown_field_rejected(self):
        with self.assertRaises(TypeError):
            await create_applicant(self.session, "A2001", name="X", created_at=None)

    async def test_get_missing(self):
        with self.assertRaises(ApplicantNotFoundError):
            await get_applicant(self.session, "missing")

    async def test_update_mutable_fields(self):
        """Corrections change the given fields; id and created_at stay put."""
        original = await create_applicant(self.session, "A2001", **applicant_fields())
        await self.session.commit()
        created_at = original.created_at

        updated = await update_applicant(
            self.session, "A2001", {"email": "arjun@example.org", "salary": Decimal("1200.00")}
        )
        await self.session.commit()
        self.assertEqual(updated.email, "arjun@example.org")
        self.assertEqual(updated.salary, Decimal("1200.00"))
        self.assertEqual(updated.phone, "9012345678")
        self.assertEqual(updated.created_at, created_at)

    async def test_update_rejects_identity_fields(self):
        await create_applicant(self.session, "A2001", **applicant_fields())
        for field in ("id", "created_at"):
            with self.assertRaises(TypeError):
                await update_applicant(self.session, "A2001", {field: "x"})

    async def test_update_missing(self):
        with self.assertRaises(ApplicantNotFoundError):
            await update_applicant(self.session, "missing", {"name": "X"})


if __name__ == "__main__":
    unittest.main()
