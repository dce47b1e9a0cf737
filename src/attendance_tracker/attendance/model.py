from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in (and optional check-out) for a user on a day."""

    record_id: str
    user_id: str
    user_name: str
    check_in: datetime
    status: AttendanceStatus
    check_out: Optional[datetime] = None
    location: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "userId": self.user_id,
            "userName": self.user_name,
            "checkIn": self.check_in.isoformat(),
            "checkOut": self.check_out.isoformat() if self.check_out else None,
            "status": self.status.value,
            "location": self.location,
            "notes": self.notes,
        }
