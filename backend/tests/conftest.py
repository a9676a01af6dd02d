from __future__ import annotations

import os

# settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from app.auth.actor import Actor  # noqa: E402
from app.auth.deps import get_jwt_config  # noqa: E402
from app.auth.jwt_tokens import create_access_token  # noqa: E402
from app.core.db import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Field, FieldType, User, UserRole, Venue  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    # file-backed so several threads can hold their own connections
    eng = create_engine(
        f"sqlite:///{tmp_path / 'playmate.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )

    @event.listens_for(eng, "connect")
    def _fk_on(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def base_time() -> datetime:
    """Tomorrow 10:00 UTC."""
    tomorrow = datetime.now(timezone.utc).date() + timedelta(days=1)
    return datetime(tomorrow.year, tomorrow.month, tomorrow.day, 10, 0, tzinfo=timezone.utc)


def make_user(db, *, name="Fajar", email=None, role=UserRole.USER, verified=True) -> User:
    email = email or f"{name.lower().replace(' ', '.')}-{os.urandom(3).hex()}@mail.test"
    u = User(name=name, email=email, role=UserRole(role).value, is_verified=verified)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def make_field(db, *, venue: Venue | None = None, name="Court A", type_=FieldType.FUTSAL) -> Field:
    if venue is None:
        owner = make_user(db, name="Owner", role=UserRole.OWNER)
        venue = Venue(name="GOR Senayan", phone="0211234567", address="Jl. Pintu Satu", user_id=owner.id)
        db.add(venue)
        db.commit()
        db.refresh(venue)
    f = Field(name=name, type=FieldType(type_).value, venue_id=venue.id)
    db.add(f)
    db.commit()
    db.refresh(f)
    return f


def actor_of(user: User) -> Actor:
    return Actor.from_user(user)


@pytest.fixture
def user(db) -> User:
    return make_user(db)


@pytest.fixture
def field(db) -> Field:
    return make_field(db)


@pytest.fixture
def client(session_factory):
    def _override_get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(get_jwt_config(), user.id)
    return {"Authorization": f"Bearer {token}"}
