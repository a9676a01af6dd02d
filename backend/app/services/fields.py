from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models import Field


def field_exists(db: Session, *, field_id: int, venue_id: int) -> bool:
    return get_field(db, field_id=field_id, venue_id=venue_id) is not None


def get_field(db: Session, *, field_id: int, venue_id: int, for_update: bool = False) -> Field | None:
    """Field `field_id` if it belongs to `venue_id`.

    for_update locks the row (SELECT ... FOR UPDATE) until the transaction ends;
    backends without row locks ignore it.
    """
    stmt = select(Field).where(Field.id == field_id, Field.venue_id == venue_id)
    if for_update:
        stmt = stmt.with_for_update()
    return db.execute(stmt).scalar_one_or_none()
