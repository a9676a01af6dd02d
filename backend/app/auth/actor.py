from __future__ import annotations

from dataclasses import dataclass

from app.models import User


@dataclass(frozen=True)
class Actor:
    """Verified caller identity handed to the booking services."""

    user_id: int
    role: str
    is_verified: bool

    @classmethod
    def from_user(cls, user: User) -> "Actor":
        return cls(user_id=user.id, role=user.role, is_verified=bool(user.is_verified))
