from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_bounds, now_local, short_day_label
from ..core.constants import ANALYTICS_DAYS
from ..core.enums import AttendanceStatus
from ..users.repository import UserRepository


def attendance_rate(present: int, total: int) -> int:
    """present/total as a percentage rounded half-up; 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * present + total) // (2 * total)


@dataclass(frozen=True)
class AnalyticsReport:
    daily_attendance: list[dict]
    user_summary: list[dict]
    statistics: dict

    def to_dict(self) -> dict:
        return {
            "dailyAttendance": self.daily_attendance,
            "userSummary": self.user_summary,
            "statistics": self.statistics,
        }


class AnalyticsService:
    """Recomputes every summary from the full record list on each call."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        days: int = ANALYTICS_DAYS,
    ):
        self._attendance = attendance
        self._users = users
        self._clock = clock
        self._days = int(days)

    def build_report(self) -> AnalyticsReport:
        records = list(self._attendance.get_all())
        users = list(self._users.get_all())
        today = self._clock().date()

        daily = []
        for offset in range(self._days - 1, -1, -1):
            day = today - timedelta(days=offset)
            start, end = day_bounds(day)
            day_records = [r for r in records if start <= r.check_in < end]
            daily.append(
                {
                    "date": short_day_label(day),
                    "present": sum(1 for r in day_records if r.status == AttendanceStatus.PRESENT),
                    "late": sum(1 for r in day_records if r.status == AttendanceStatus.LATE),
                    "total": len(day_records),
                }
            )

        summary = []
        for user in users:
            user_records = [r for r in records if r.user_id == user.user_id]
            present = sum(1 for r in user_records if r.status == AttendanceStatus.PRESENT)
            late = sum(1 for r in user_records if r.status == AttendanceStatus.LATE)
            summary.append(
                {
                    "userId": user.user_id,
                    "userName": user.name,
                    "totalDays": len(user_records),
                    "presentCount": present,
                    "lateCount": late,
                    "attendanceRate": attendance_rate(present, len(user_records)),
                }
            )

        total_present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
        total_late = sum(1 for r in records if r.status == AttendanceStatus.LATE)
        today_start, today_end = day_bounds(today)
        today_records = [r for r in records if today_start <= r.check_in < today_end]

        statistics = {
            "totalRecords": len(records),
            "totalUsers": len(users),
            "totalPresent": total_present,
            "totalLate": total_late,
            "overallAttendanceRate": attendance_rate(total_present, len(records)),
            "presentToday": sum(1 for r in today_records if r.status == AttendanceStatus.PRESENT),
            "lateToday": sum(1 for r in today_records if r.status == AttendanceStatus.LATE),
            "todayAttendanceRate": attendance_rate(len(today_records), len(users)),
        }

        return AnalyticsReport(daily_attendance=daily, user_summary=summary, statistics=statistics)
