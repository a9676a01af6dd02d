"""Access guards evaluated before a booking operation runs.

Each guard looks at the resolved caller and returns a GuardResult; a route
declares its guards as an ordered list and the first failure wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from fastapi import Depends, HTTPException, status

from app.auth.actor import Actor
from app.auth.deps import get_current_user_optional
from app.models import User, UserRole


@dataclass(frozen=True)
class GuardResult:
    ok: bool
    reason: str | None = None
    status_code: int = status.HTTP_403_FORBIDDEN
    code: str = "Forbidden"

    def to_http_exception(self) -> HTTPException:
        # same body shape as DomainError responses
        return HTTPException(
            status_code=self.status_code,
            detail={"message": self.reason, "code": self.code, "details": {}},
        )


PASS = GuardResult(ok=True)

Guard = Callable[[User | None], GuardResult]


def authenticated(user: User | None) -> GuardResult:
    if user is None:
        return GuardResult(False, "Not authenticated", status.HTTP_401_UNAUTHORIZED, "Unauthenticated")
    return PASS


def verified(user: User | None) -> GuardResult:
    if user is None or not user.is_verified:
        return GuardResult(False, "Account is not verified", status.HTTP_401_UNAUTHORIZED, "Unverified")
    return PASS


def role(required: UserRole | str) -> Guard:
    required_value = UserRole(required).value

    def _check(user: User | None) -> GuardResult:
        if user is None or user.role != required_value:
            return GuardResult(False, f"Only '{required_value}' accounts have access")
        return PASS

    _check.__name__ = f"role_{required_value}"
    return _check


def run_guards(user: User | None, guards: Sequence[Guard]) -> Actor:
    for guard in guards:
        result = guard(user)
        if not result.ok:
            raise result.to_http_exception()
    if user is None:
        # a pipeline without `authenticated` must still not produce an anonymous actor
        raise authenticated(None).to_http_exception()
    return Actor.from_user(user)


def require(*guards: Guard):
    """FastAPI dependency: runs `guards` in order and yields the Actor."""

    def _dependency(user: User | None = Depends(get_current_user_optional)) -> Actor:
        return run_guards(user, guards)

    return _dependency


# common pipelines
require_member = require(authenticated, verified)
require_player = require(authenticated, verified, role(UserRole.USER))
