# backend/app/core/db.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    PendingRollbackError,
    TimeoutError as SATimeoutError,
)
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import settings
from app.core.exceptions import StorageUnavailable

log = logging.getLogger("playmate.db")


class Base(DeclarativeBase):
    pass


engine = create_engine(settings.database_url, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    """FastAPI dependency: yields sync SQLAlchemy Session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def storage_errors(db: Session) -> Iterator[None]:
    """Roll back and re-raise connectivity faults as StorageUnavailable.

    Only faults a caller can retry unchanged are mapped: lost or refused
    connections, pool exhaustion and aborted transactions. IntegrityError is
    left alone (callers turn constraint violations into business errors), and
    so are other driver errors such as DataError or ProgrammingError, which a
    retry would only repeat.
    """
    try:
        yield
    except IntegrityError:
        db.rollback()
        raise
    except (OperationalError, InterfaceError, SATimeoutError, PendingRollbackError) as e:
        db.rollback()
        log.warning("storage fault: %s", e.__class__.__name__, exc_info=True)
        raise StorageUnavailable("Storage is temporarily unavailable") from e
    except DBAPIError as e:
        db.rollback()
        if e.connection_invalidated:
            log.warning("storage fault: connection invalidated", exc_info=True)
            raise StorageUnavailable("Storage is temporarily unavailable") from e
        raise


# Ensure model modules are imported so SQLAlchemy can resolve relationships
import app.models  # noqa: F401,E402
