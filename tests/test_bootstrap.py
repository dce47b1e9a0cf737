from __future__ import annotations

from pathlib import Path

from attendance_tracker.database.bootstrap import apply_schema, iter_sql_statements, seed_demo_data
from attendance_tracker.database.connection import DBConfig


class RecordingCursor:
    def __init__(self, log):
        self._log = log

    def execute(self, sql, params=()):
        self._log.append((" ".join(sql.split()), tuple(params)))


class RecordingConnection:
    def __init__(self, log):
        self._log = log
        self.commits = 0

    def cursor(self, dictionary=False):
        return RecordingCursor(self._log)

    def commit(self):
        self.commits += 1

    def close(self):
        pass


class RecordingFactory:
    def __init__(self):
        self.config = DBConfig.from_dict({"database": "attendance_test"})
        self.executed = []
        self.connects = []

    def connect(self, *, with_database=True):
        self.connects.append(with_database)
        return RecordingConnection(self.executed)


def test_sql_splitter_keeps_quoted_semicolons():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n  ;SELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        "SELECT 1",
    ]


def test_apply_schema_creates_database_then_tables():
    factory = RecordingFactory()
    schema = Path(__file__).resolve().parents[1] / "database" / "schema.sql"

    apply_schema(factory, schema_path=schema)

    assert factory.connects == [False, True]
    statements = [sql for sql, _ in factory.executed]
    assert statements[0].startswith("CREATE DATABASE IF NOT EXISTS `attendance_test`")
    assert not any(s.startswith("USE ") for s in statements)
    assert sum(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements) == 2


def test_seed_demo_data_inserts_users_and_records():
    factory = RecordingFactory()

    seed_demo_data(factory)

    users = [p for sql, p in factory.executed if "INTO users" in sql]
    records = [p for sql, p in factory.executed if "INTO attendance_records" in sql]
    assert [u[1] for u in users] == ["admin@example.com", "john@example.com", "jane@example.com"]
    assert [r[5] for r in records] == ["present", "late"]
