from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .connection import DatabaseConnection
from .seed import DEMO_RECORDS, DEMO_USERS

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    quote = None

    for ch in sql:
        if quote:
            buf.append(ch)
            if ch == quote:
                quote = None
            continue

        if ch in ("'", '"'):
            quote = ch
            buf.append(ch)
            continue

        if ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied from %s", schema_path)


def seed_demo_data(conn_factory: DatabaseConnection) -> None:
    """Insert demo users and records; rows that already exist are left alone."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for u in DEMO_USERS:
            cur.execute(
                """
                INSERT IGNORE INTO users (user_id, email, password, name, role, created_at)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (u.user_id, u.email, u.password, u.name, u.role.value, u.created_at),
            )
        for r in DEMO_RECORDS:
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records
                    (record_id, user_id, user_name, check_in, check_out, status, location, notes)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (int(r.record_id), r.user_id, r.user_name, r.check_in, r.check_out, r.status.value, r.location, r.notes),
            )
        conn.commit()
    finally:
        conn.close()
    logger.info("Demo data ready (%d users, %d records)", len(DEMO_USERS), len(DEMO_RECORDS))
