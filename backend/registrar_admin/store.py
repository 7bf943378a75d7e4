"""Process-lifetime state owned by the application: activity log and settings."""

from __future__ import annotations

import threading
from dataclasses import asdict, dataclass, fields
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from .sample_data import sample_activity


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class ActivityEntry:
    type: str
    user: str
    action: str
    time: str
    icon: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class SystemSettings:
    semester: Any = "Semester 2 2025/2026"
    startDate: Any = "2026-01-06"
    endDate: Any = "2026-01-20"
    registrationOpen: Any = True
    maxCreditHours: Any = 21
    minCreditHours: Any = 12
    requireAaApproval: Any = True
    emailNewRegistrations: Any = True
    emailApprovals: Any = True
    dailySummary: Any = False

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SystemSettings":
        """Build a record field by field; absent fields become None."""

        return cls(**{field.name: payload.get(field.name) for field in fields(cls)})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DashboardStore:
    """Activity feed and settings record shared by all request handlers.

    Writes are last-write-wins; readers always get copies. ``max_entries``
    of 0 keeps every recorded entry for the life of the process.
    """

    def __init__(self, max_entries: int = 0) -> None:
        self.max_entries = max_entries
        self._lock = threading.Lock()
        self._activity: List[ActivityEntry] = []
        self._settings = SystemSettings()

    def record(self, kind: str, user: str, action: str, icon: str) -> ActivityEntry:
        entry = ActivityEntry(
            type=kind, user=user, action=action, time=_utc_timestamp(), icon=icon
        )
        with self._lock:
            self._activity.insert(0, entry)
            if self.max_entries > 0 and len(self._activity) > self.max_entries:
                del self._activity[self.max_entries :]
        return entry

    def recorded_activity(self) -> List[Dict[str, str]]:
        with self._lock:
            return [entry.to_dict() for entry in self._activity]

    def activity_feed(self) -> List[Dict[str, str]]:
        """Recorded entries, newest first, followed by the fixed sample entries."""

        return self.recorded_activity() + sample_activity()

    def get_settings(self) -> Dict[str, Any]:
        with self._lock:
            return self._settings.to_dict()

    def replace_settings(self, settings: SystemSettings) -> None:
        with self._lock:
            self._settings = settings


__all__ = ["ActivityEntry", "SystemSettings", "DashboardStore"]
