import json
import unittest

from services.audit import list_audit_entries, record_audit
from support import DatabaseTestCase


class TestAuditLog(DatabaseTestCase):
    async def test_entries_are_appended_verbatim(self):
        """N calls give exactly N rows, payloads unchanged byte for byte."""
        payloads = [
            ('{"applicantId": "A1003", "loanAmount": 20000.00}', '{"id": 1000}'),
            ("  leading and trailing whitespace \n", "\t"),
            ("ünïcödé ✓ 日本語", "emoji 🚀"),
            ("x" * 200_000, "<xml attr='1'>not json</xml>"),
            ("", None),
        ]
        for i, (request, response) in enumerate(payloads):
            await record_audit(self.session, f"tx-{i}", request, response, "SUBMIT_APPLICATION")
        await self.session.commit()

        entries = await list_audit_entries(self.session)
        self.assertEqual(len(entries), len(payloads))
        for entry, (request, response) in zip(entries, payloads):
            self.assertEqual(entry.request_payload, request)
            self.assertEqual(entry.response_payload, response)
        self.assertEqual(len(entries[3].request_payload), 200_000)
        self.assertEqual([e.id for e in entries], sorted(e.id for e in entries))

    async def test_transaction_id_is_not_unique(self):
        for log_type in ("SUBMIT_APPLICATION", "SET_APPLICATION_STATUS"):
            await record_audit(self.session, "tx-shared", "{}", "{}", log_type)
        await record_audit(self.session, "tx-other", "{}", "{}", "SUBMIT_APPLICATION")
        await self.session.commit()

        shared = await list_audit_entries(self.session, transaction_id="tx-shared")
        self.assertEqual([e.log_type for e in shared], ["SUBMIT_APPLICATION", "SET_APPLICATION_STATUS"])

        submits = await list_audit_entries(self.session, log_type="SUBMIT_APPLICATION")
        self.assertEqual({e.transaction_id for e in submits}, {"tx-shared", "tx-other"})

        both = await list_audit_entries(self.session, transaction_id="tx-other", log_type="SUBMIT_APPLICATION")
        self.assertEqual(len(both), 1)

    async def test_created_at_set_by_server(self):
        entry = await record_audit(self.session, "tx-1", json.dumps({"a": 1}), None, "GET_APPLICANT")
        await self.session.commit()
        self.assertIsNotNone(entry.id)
        self.assertIsNotNone(entry.created_at)


if __name__ == "__main__":
    unittest.main()
