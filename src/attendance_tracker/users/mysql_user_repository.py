from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, email, password, name, role, created_at"


def _to_user(r: Dict[str, Any]) -> User:
    return User(
        user_id=str(r["user_id"]),
        email=r["email"],
        password=r["password"],
        name=r["name"],
        role=Role(r["role"]),
        created_at=r["created_at"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            r = fetchone(cur)
            return _to_user(r) if r else None

    def get_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY user_id",
                (Role.USER.value,),
            )
            return [_to_user(r) for r in fetchall(cur)]
