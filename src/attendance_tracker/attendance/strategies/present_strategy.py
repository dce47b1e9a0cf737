from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """Check-in before the work start cutoff."""

    def decide_checkin(self, *, now: datetime, work_start: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
