"""Demo accounts and sample records loaded when SEED_DEMO_DATA is on."""

from __future__ import annotations

from datetime import datetime

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, Role
from ..users.model import User

_CREATED = datetime(2024, 1, 1)

DEMO_USERS = (
    User(user_id="1", email="admin@example.com", password="admin123", name="Admin User", role=Role.ADMIN, created_at=_CREATED),
    User(user_id="2", email="john@example.com", password="user123", name="John Doe", role=Role.USER, created_at=_CREATED),
    User(user_id="3", email="jane@example.com", password="user123", name="Jane Smith", role=Role.USER, created_at=_CREATED),
)

DEMO_RECORDS = (
    AttendanceRecord(
        record_id="1",
        user_id="2",
        user_name="John Doe",
        check_in=datetime(2024, 1, 15, 9, 0),
        check_out=datetime(2024, 1, 15, 17, 30),
        status=AttendanceStatus.PRESENT,
        location="Office",
    ),
    AttendanceRecord(
        record_id="2",
        user_id="3",
        user_name="Jane Smith",
        check_in=datetime(2024, 1, 15, 9, 15),
        check_out=datetime(2024, 1, 15, 17, 45),
        status=AttendanceStatus.LATE,
        location="Office",
    ),
)
