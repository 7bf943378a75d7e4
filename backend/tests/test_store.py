"""DashboardStore behaviour outside of a request."""

from __future__ import annotations

import re
import sys
import unittest
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from registrar_admin.store import DashboardStore, SystemSettings

ISO_UTC_MILLIS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class DashboardStoreTestCase(unittest.TestCase):
    def test_record_prepends_with_utc_timestamp(self) -> None:
        store = DashboardStore()
        store.record("login", "A", "first", "login")
        store.record("settings", "B", "second", "settings")

        recorded = store.recorded_activity()
        self.assertEqual(["second", "first"], [entry["action"] for entry in recorded])
        self.assertRegex(recorded[0]["time"], ISO_UTC_MILLIS)
        self.assertEqual({"type", "user", "action", "time", "icon"}, set(recorded[0]))

    def test_unbounded_by_default(self) -> None:
        store = DashboardStore()
        for index in range(500):
            store.record("login", "A", str(index), "login")
        self.assertEqual(500, len(store.recorded_activity()))
        self.assertEqual(503, len(store.activity_feed()))

    def test_limit_drops_oldest(self) -> None:
        store = DashboardStore(max_entries=2)
        for action in ("one", "two", "three"):
            store.record("login", "A", action, "login")

        self.assertEqual(["three", "two"], [e["action"] for e in store.recorded_activity()])
        self.assertEqual(5, len(store.activity_feed()))

    def test_readers_get_copies(self) -> None:
        store = DashboardStore()
        store.record("login", "A", "first", "login")

        store.recorded_activity()[0]["action"] = "changed"
        store.get_settings()["semester"] = "changed"

        self.assertEqual("first", store.recorded_activity()[0]["action"])
        self.assertEqual("Semester 2 2025/2026", store.get_settings()["semester"])

    def test_settings_from_payload_keeps_values_verbatim(self) -> None:
        settings = SystemSettings.from_payload({"semester": "S", "maxCreditHours": "21"})

        record = settings.to_dict()
        self.assertEqual("S", record["semester"])
        self.assertEqual("21", record["maxCreditHours"])
        self.assertIsNone(record["dailySummary"])

    def test_injected_store_is_used_by_app(self) -> None:
        from registrar_admin import create_app

        store = DashboardStore()
        app = create_app({"TESTING": True, "SEED_ADMIN": False}, store=store)
        app.test_client().post("/api/admin/saveSettings", json={"semester": "Injected"})

        self.assertEqual("Injected", store.get_settings()["semester"])
        self.assertEqual(1, len(store.recorded_activity()))


if __name__ == "__main__":
    unittest.main()
