from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access to the admin views."""

    ADMIN = "admin"
    USER = "user"


class AttendanceStatus(str, Enum):
    """Attendance classification stored on each record."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
