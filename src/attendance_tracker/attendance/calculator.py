from __future__ import annotations

from ..core.constants import IN_PROGRESS_LABEL
from .model import AttendanceRecord


class WorkHoursCalculator:
    """Worked time of a record: check-out minus check-in, not below 0."""

    def worked_minutes(self, record: AttendanceRecord) -> int:
        if not record.check_out:
            return 0
        minutes = int((record.check_out - record.check_in).total_seconds() // 60)
        return max(minutes, 0)

    def label(self, record: AttendanceRecord) -> str:
        if not record.check_out:
            return IN_PROGRESS_LABEL
        minutes = self.worked_minutes(record)
        return f"{minutes // 60}h {minutes % 60}m"
