"""Wall clock used to decide what "today" means for reports and validation."""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo


class Clock:
    def __init__(self, tz_name: Optional[str] = None):
        self.tz_name = tz_name
        self._tz = ZoneInfo(tz_name) if tz_name else None

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now().astimezone()
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()

    def utcnow(self) -> datetime:
        """Timestamp stored as `created_at`."""
        return self.now().astimezone(timezone.utc)
