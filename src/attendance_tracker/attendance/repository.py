from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(
        self,
        *,
        user_id: str,
        user_name: str,
        check_in: datetime,
        status: AttendanceStatus,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: str, **changes: Any) -> Optional[AttendanceRecord]:
        """Merge fields into an existing record; None when the id is unknown."""

        raise NotImplementedError

    def get_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_date_range(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        """Records whose check-in lies in [start, end], both bounds inclusive."""

        raise NotImplementedError

    def get_today_by_user_id(self, user_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        raise NotImplementedError
