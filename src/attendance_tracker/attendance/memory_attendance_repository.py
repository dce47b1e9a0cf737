from __future__ import annotations

import itertools
from dataclasses import fields, replace
from datetime import date, datetime
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import day_bounds, now_local
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository

_MUTABLE_FIELDS = {f.name for f in fields(AttendanceRecord)} - {"record_id"}


class InMemoryAttendanceRepository(AttendanceRepository):
    """List-backed store. Ids are sequential strings continuing after the seed."""

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: list[AttendanceRecord] = list(records)
        start = max((int(r.record_id) for r in self._records if r.record_id.isdigit()), default=0)
        self._ids = itertools.count(start + 1)

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
        record = AttendanceRecord(
            record_id=str(next(self._ids)),
            user_id=user_id,
            user_name=user_name,
            check_in=check_in,
            status=status,
            location=location,
            notes=notes,
        )
        self._records.append(record)
        return record

    def update(self, record_id: str, **changes: Any) -> Optional[AttendanceRecord]:
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise TypeError(f"Unknown attendance fields: {sorted(unknown)}")

        for index, record in enumerate(self._records):
            if record.record_id == record_id:
                updated = replace(record, **changes)
                self._records[index] = updated
                return updated
        return None

    def get_all(self) -> Sequence[AttendanceRecord]:
        return list(self._records)

    def get_by_user_id(self, user_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if r.user_id == user_id]

    def get_by_date_range(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if start <= r.check_in <= end]

    def get_today_by_user_id(self, user_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        start, end = day_bounds(today or now_local().date())
        return next(
            (r for r in self._records if r.user_id == user_id and start <= r.check_in < end),
            None,
        )
