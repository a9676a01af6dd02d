from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from app.auth.guards import authenticated, require, role, run_guards, verified
from app.models import UserRole


def _user(**kw):
    base = {"id": 7, "role": "user", "is_verified": True}
    base.update(kw)
    return SimpleNamespace(**base)


def test_guards_report_reasons():
    assert authenticated(None).ok is False
    assert authenticated(None).status_code == 401
    assert verified(_user(is_verified=False)).reason == "Account is not verified"
    assert role(UserRole.USER)(_user(role="owner")).status_code == 403
    assert role("owner")(_user(role="owner")).ok


def test_first_failing_guard_wins():
    with pytest.raises(HTTPException) as exc:
        run_guards(_user(is_verified=False, role="owner"), [authenticated, verified, role(UserRole.USER)])
    assert exc.value.status_code == 401
    assert exc.value.detail == {"message": "Account is not verified", "code": "Unverified", "details": {}}


def test_pipeline_returns_actor():
    actor = run_guards(_user(), [authenticated, verified, role(UserRole.USER)])
    assert actor.user_id == 7
    assert actor.role == "user"
    assert actor.is_verified is True


def test_anonymous_never_becomes_an_actor():
    with pytest.raises(HTTPException) as exc:
        run_guards(None, [])
    assert exc.value.status_code == 401
    assert exc.value.detail["code"] == "Unauthenticated"


def test_unknown_role_is_a_programming_error():
    with pytest.raises(ValueError):
        role("admin")


def test_require_builds_a_dependency():
    dep = require(authenticated)
    assert dep(user=_user(id=3)).user_id == 3
