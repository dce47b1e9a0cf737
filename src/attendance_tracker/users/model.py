from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no storage access. Passwords are stored as
    plaintext and must never leave the service layer.
    """

    user_id: str
    email: str
    password: str
    name: str
    role: Role
    created_at: datetime

    def to_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "createdAt": self.created_at.isoformat(),
        }
