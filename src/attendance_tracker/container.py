from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from pathlib import Path
from typing import Callable, Optional

from .analytics.service import AnalyticsService
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_WORK_START
from .database.bootstrap import apply_schema, seed_demo_data
from .database.connection import DatabaseConnection, DBConfig
from .database.seed import DEMO_RECORDS, DEMO_USERS
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService

STORAGE_BACKENDS = ("memory", "mysql")


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService


def build_container(
    *,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    seed_demo: bool = True,
    auto_init_db: bool = False,
    schema_path: Optional[Path] = None,
    work_start: time = DEFAULT_WORK_START,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    if storage_backend == "memory":
        users_repo: UserRepository = InMemoryUserRepository(DEMO_USERS if seed_demo else ())
        attendance_repo: AttendanceRepository = InMemoryAttendanceRepository(DEMO_RECORDS if seed_demo else ())
    elif storage_backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if auto_init_db:
            if schema_path is None:
                raise ValueError("schema_path is required when auto_init_db is enabled")
            apply_schema(conn, schema_path=schema_path)
        if seed_demo:
            seed_demo_data(conn)
        users_repo = MySQLUserRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
    else:
        raise ValueError(f"Unknown storage backend {storage_backend!r}; expected one of {STORAGE_BACKENDS}")

    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        attendance_service=AttendanceService(attendance_repo, work_start=work_start, clock=clock),
        analytics_service=AnalyticsService(attendance_repo, users_repo, clock=clock),
    )
