from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Users are seeded once and never mutated, so there is no write API.
    """

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_all(self) -> Sequence[User]:
        """Non-admin users only."""
        raise NotImplementedError
