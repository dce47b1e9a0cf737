from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import day_bounds, now_local
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "record_id, user_id, user_name, check_in, check_out, status, location, notes"

# attribute name -> column name for partial updates
_UPDATABLE = {
    "user_id": "user_id",
    "user_name": "user_name",
    "check_in": "check_in",
    "check_out": "check_out",
    "status": "status",
    "location": "location",
    "notes": "notes",
}


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        user_id=str(r["user_id"]),
        user_name=r["user_name"],
        check_in=r["check_in"],
        check_out=r.get("check_out"),
        status=AttendanceStatus(r["status"]),
        location=r.get("location"),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(user_id, user_name, check_in, status, location, notes)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (user_id, user_name, check_in, status.value, location, notes),
            )
            record_id = str(cur.lastrowid)

        return AttendanceRecord(
            record_id=record_id,
            user_id=user_id,
            user_name=user_name,
            check_in=check_in,
            status=status,
            location=location,
            notes=notes,
        )

    def update(self, record_id: str, **changes: Any) -> Optional[AttendanceRecord]:
        unknown = set(changes) - set(_UPDATABLE)
        if unknown:
            raise TypeError(f"Unknown attendance fields: {sorted(unknown)}")

        with db_cursor(self._conn_factory) as (_, cur):
            if changes:
                assignments = ", ".join(f"{_UPDATABLE[k]}=%s" for k in changes)
                values = [v.value if isinstance(v, AttendanceStatus) else v for v in changes.values()]
                cur.execute(
                    f"UPDATE attendance_records SET {assignments} WHERE record_id=%s",
                    (*values, record_id),
                )

            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (record_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records ORDER BY record_id")
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_user_id(self, user_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE user_id=%s ORDER BY record_id",
                (user_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_date_range(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE check_in >= %s AND check_in <= %s
                ORDER BY record_id
                """,
                (start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_today_by_user_id(self, user_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        start, end = day_bounds(today or now_local().date())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE user_id=%s AND check_in >= %s AND check_in < %s
                ORDER BY record_id
                LIMIT 1
                """,
                (user_id, start, end),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None
