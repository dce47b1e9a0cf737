from __future__ import annotations

import hmac
import logging
from typing import Sequence

from ..core.exceptions import AuthenticationError, NotFoundError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> User:
        user = self._users.find_by_email(email)
        if not user or not hmac.compare_digest(user.password.encode(), password.encode()):
            logger.info("Rejected login for %s", email)
            raise AuthenticationError("Invalid credentials")

        logger.info("User %s logged in", user.user_id)
        return user

    def get_current_user(self, user_id: str) -> User:
        user = self._users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user


class UserService:
    """Use case: list employees (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return self._users.get_all()
