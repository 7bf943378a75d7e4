"""Settings and activity log operations."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path
from unittest import mock

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from registrar_admin import create_app

DEFAULT_SETTINGS = {
    "semester": "Semester 2 2025/2026",
    "startDate": "2026-01-06",
    "endDate": "2026-01-20",
    "registrationOpen": True,
    "maxCreditHours": 21,
    "minCreditHours": 12,
    "requireAaApproval": True,
    "emailNewRegistrations": True,
    "emailApprovals": True,
    "dailySummary": False,
}

NEW_SETTINGS = {
    "semester": "Semester 1 2026/2027",
    "startDate": "2026-09-01",
    "endDate": "2026-09-15",
    "registrationOpen": False,
    "maxCreditHours": 18,
    "minCreditHours": 10,
    "requireAaApproval": False,
    "emailNewRegistrations": False,
    "emailApprovals": True,
    "dailySummary": True,
}

SAMPLE_ACTIONS = [
    "Updated system settings",
    "Batch approved 15 registrations for SECRH",
    "Exported registration report",
]


class SettingsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.app = create_app({"TESTING": True, "SEED_ADMIN": False})
        self.client = self.app.test_client()

    def _activity(self):
        return self.client.get("/api/admin/getActivityLog").get_json()

    def test_default_settings(self) -> None:
        self.assertEqual(DEFAULT_SETTINGS, self.client.get("/api/admin/getSettings").get_json())

    def test_save_then_get_returns_saved_record(self) -> None:
        response = self.client.post("/api/admin/saveSettings", json=NEW_SETTINGS)

        self.assertEqual(200, response.status_code)
        self.assertEqual(
            {"success": True, "message": "Settings saved successfully"}, response.get_json()
        )
        self.assertEqual(NEW_SETTINGS, self.client.get("/api/admin/getSettings").get_json())

        recorded = self.app.extensions["dashboard_store"].recorded_activity()
        self.assertEqual(1, len(recorded))
        self.assertEqual("settings", recorded[0]["type"])
        self.assertEqual("System Administrator", recorded[0]["user"])

    def test_save_replaces_whole_record(self) -> None:
        self.client.post("/api/admin/saveSettings", json={"semester": "Short Semester"})

        saved = self.client.get("/api/admin/getSettings").get_json()
        self.assertEqual("Short Semester", saved["semester"])
        self.assertIsNone(saved["maxCreditHours"])
        self.assertEqual(set(DEFAULT_SETTINGS), set(saved))

    def test_save_does_not_validate_ranges(self) -> None:
        payload = dict(NEW_SETTINGS, minCreditHours=30, maxCreditHours=5)
        self.client.post("/api/admin/saveSettings", json=payload)

        saved = self.client.get("/api/admin/getSettings").get_json()
        self.assertEqual(30, saved["minCreditHours"])
        self.assertEqual(5, saved["maxCreditHours"])

    def test_save_ignores_unknown_fields(self) -> None:
        self.client.post("/api/admin/saveSettings", json=dict(NEW_SETTINGS, extra="x"))
        self.assertEqual(NEW_SETTINGS, self.client.get("/api/admin/getSettings").get_json())

    def test_save_rejects_non_object_body(self) -> None:
        for body in ([1, 2], "text", None):
            with self.subTest(body=body):
                response = self.client.post("/api/admin/saveSettings", json=body)
                self.assertEqual(400, response.status_code)
        self.assertEqual(DEFAULT_SETTINGS, self.client.get("/api/admin/getSettings").get_json())
        self.assertEqual(3, len(self._activity()))

    def test_activity_log_starts_with_samples_only(self) -> None:
        entries = self._activity()
        self.assertEqual(SAMPLE_ACTIONS, [entry["action"] for entry in entries])
        self.assertEqual(["settings", "check", "download"], [entry["icon"] for entry in entries])

    def test_activity_log_newest_first_before_samples(self) -> None:
        with mock.patch(
            "registrar_admin.routes.auth_simple.find_admin",
            return_value={"_id": "1", "username": "admin", "name": "System Administrator"},
        ):
            self.client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
        self.client.post("/api/admin/saveSettings", json=NEW_SETTINGS)

        entries = self._activity()

        self.assertEqual(5, len(entries))
        self.assertEqual(["settings", "login"], [entry["type"] for entry in entries[:2]])
        self.assertGreaterEqual(entries[0]["time"], entries[1]["time"])
        self.assertEqual(SAMPLE_ACTIONS, [entry["action"] for entry in entries[-3:]])


if __name__ == "__main__":
    unittest.main()
