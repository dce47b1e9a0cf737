from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User] = ()):
        self._users: list[User] = list(users)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users if u.email == email), None)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.user_id == user_id), None)

    def get_all(self) -> Sequence[User]:
        return [u for u in self._users if u.role == Role.USER]
