from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, now: datetime, work_start: time) -> AttendanceStrategy:
        cutoff = datetime.combine(now.date(), work_start)
        if now < cutoff:
            return PresentStrategy()
        return LateStrategy()
