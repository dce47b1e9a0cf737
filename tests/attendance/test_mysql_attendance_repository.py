from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_tracker.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from attendance_tracker.core.enums import AttendanceStatus


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = 41
        self.rowcount = 0

    def execute(self, sql, params=()):
        self._conn.executed.append((" ".join(sql.split()), tuple(params)))
        self.lastrowid += 1

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=None):
        self.conn = FakeConnection(rows or [])

    def connect(self, *, with_database=True):
        return self.conn


ROW = {
    "record_id": 7,
    "user_id": "2",
    "user_name": "John Doe",
    "check_in": datetime(2026, 2, 2, 8, 30),
    "check_out": None,
    "status": "present",
    "location": "Office",
    "notes": None,
}


def test_create_returns_record_with_lastrowid():
    factory = FakeConnFactory()
    repo = MySQLAttendanceRepository(factory)

    rec = repo.create(user_id="2", user_name="John Doe", check_in=ROW["check_in"], status=AttendanceStatus.LATE)

    assert rec.record_id == "42"
    sql, params = factory.conn.executed[0]
    assert sql.startswith("INSERT INTO attendance_records")
    assert params[3] == "late"
    assert factory.conn.committed


def test_today_lookup_uses_half_open_day():
    factory = FakeConnFactory([ROW])
    repo = MySQLAttendanceRepository(factory)

    rec = repo.get_today_by_user_id("2", today=date(2026, 2, 2))

    assert rec.record_id == "7"
    assert rec.status == AttendanceStatus.PRESENT
    sql, params = factory.conn.executed[0]
    assert "check_in >= %s AND check_in < %s" in sql
    assert params == ("2", datetime(2026, 2, 2), datetime(2026, 2, 3))


def test_date_range_is_inclusive():
    factory = FakeConnFactory([ROW])
    repo = MySQLAttendanceRepository(factory)
    start, end = datetime(2026, 2, 1), datetime(2026, 2, 2, 23, 59)

    assert len(repo.get_by_date_range(start, end)) == 1
    sql, params = factory.conn.executed[0]
    assert "check_in >= %s AND check_in <= %s" in sql
    assert params == (start, end)


def test_update_builds_partial_set_clause():
    factory = FakeConnFactory([dict(ROW, check_out=datetime(2026, 2, 2, 17, 0))])
    repo = MySQLAttendanceRepository(factory)

    rec = repo.update("7", check_out=datetime(2026, 2, 2, 17, 0))

    assert rec.check_out == datetime(2026, 2, 2, 17, 0)
    sql, params = factory.conn.executed[0]
    assert sql == "UPDATE attendance_records SET check_out=%s WHERE record_id=%s"
    assert params == (datetime(2026, 2, 2, 17, 0), "7")


def test_update_missing_id_returns_none():
    repo = MySQLAttendanceRepository(FakeConnFactory([]))

    assert repo.update("404", notes="x") is None


def test_update_rejects_unknown_field():
    repo = MySQLAttendanceRepository(FakeConnFactory([]))

    with pytest.raises(TypeError):
        repo.update("7", password="x")
