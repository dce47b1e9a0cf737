from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_WORK_START
from ..core.exceptions import ValidationError
from .calculator import WorkHoursCalculator
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        calculator: WorkHoursCalculator | None = None,
        work_start: time = DEFAULT_WORK_START,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._calculator = calculator or WorkHoursCalculator()
        self._work_start = work_start
        self._clock = clock

    def check_in(
        self,
        user_id: str,
        user_name: str,
        *,
        location: Optional[str] = None,
        notes: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        user_id = require_non_empty(user_id, "User ID and name are required")
        user_name = require_non_empty(user_name, "User ID and name are required")
        now = now or self._clock()

        if self._attendance.get_today_by_user_id(user_id, today=now.date()):
            logger.info("User %s tried to check in twice on %s", user_id, now.date())
            raise ValidationError("Already checked in today")

        strategy = self._factory.for_checkin(now=now, work_start=self._work_start)
        decision = strategy.decide_checkin(now=now, work_start=self._work_start)

        record = self._attendance.create(
            user_id=user_id,
            user_name=user_name,
            check_in=now,
            status=decision.status,
            location=optional_text(location),
            notes=optional_text(notes),
        )
        logger.info("User %s checked in at %s (%s)", user_id, now.isoformat(), decision.status.value)
        return record

    def check_out(self, user_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        user_id = require_non_empty(user_id, "User ID is required")
        now = now or self._clock()

        record = self._attendance.get_today_by_user_id(user_id, today=now.date())
        if not record:
            logger.info("User %s tried to check out without checking in on %s", user_id, now.date())
            raise ValidationError("No check-in record found for today")
        if record.check_out is not None:
            logger.info("User %s tried to check out twice on %s", user_id, now.date())
            raise ValidationError("Already checked out today")

        updated = self._attendance.update(record.record_id, check_out=now)
        if updated is None:
            raise ValidationError("No check-in record found for today")

        logger.info("User %s checked out at %s", user_id, now.isoformat())
        return updated

    def get_today_record(self, user_id: str) -> Optional[AttendanceRecord]:
        user_id = require_non_empty(user_id, "User ID is required")
        return self._attendance.get_today_by_user_id(user_id, today=self._clock().date())

    def list_records(
        self,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Sequence[AttendanceRecord]:
        """All records, or those checked in within [start, end]; newest first."""
        if start is not None and end is not None:
            if start > end:
                raise ValidationError("Start date must not be after end date")
            records = list(self._attendance.get_by_date_range(start, end))
        else:
            records = list(self._attendance.get_all())

        records.sort(key=lambda r: r.check_in, reverse=True)
        return records

    def to_view(self, record: AttendanceRecord) -> dict:
        view = record.to_dict()
        view["workHours"] = self._calculator.label(record)
        return view

    def report_rows(self, records: Sequence[AttendanceRecord]) -> list[dict]:
        """Flat rows for CSV export."""
        return [
            {
                "date": r.check_in.strftime("%Y-%m-%d"),
                "user_id": r.user_id,
                "user_name": r.user_name,
                "check_in": r.check_in.strftime("%H:%M"),
                "check_out": r.check_out.strftime("%H:%M") if r.check_out else "-",
                "status": r.status.value,
                "work_hours": self._calculator.label(r),
                "location": r.location or "",
                "notes": r.notes or "",
            }
            for r in records
        ]
