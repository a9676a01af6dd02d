from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.auth.actor import Actor
from app.core.db import storage_errors
from app.core.exceptions import InvalidInterval, NotFound, ScheduleConflict, ValidationFailed
from app.core.locks import field_key, locks
from app.core.timeutil import to_utc, utcnow
from app.models import Booking, Membership, User
from app.services.conflicts import first_conflict
from app.services.fields import get_field
from app.services.views import BookingDetail, BookingView, PlayerView

log = logging.getLogger("playmate.bookings")

# width of bookings.keterangan
DESCRIPTION_MAX_LENGTH = 255


def _validate_proposal(description: str, start: datetime, end: datetime, now: datetime) -> str:
    text = (description or "").strip()
    if not text:
        raise ValidationFailed("description is required", details={"field": "description"})
    if len(text) > DESCRIPTION_MAX_LENGTH:
        raise ValidationFailed(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            details={"field": "description", "max_length": DESCRIPTION_MAX_LENGTH},
        )

    if start >= end:
        raise InvalidInterval(
            "play_date_end must be after play_date_start",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
    if start <= now:
        raise InvalidInterval(
            "play_date_start must be in the future",
            details={"start": start.isoformat(), "now": now.isoformat()},
        )
    return text


def _bookings_ending_after(db: Session, *, field_id: int, start: datetime) -> list[BookingView]:
    # anything ending at or before `start` can't overlap [start, end)
    rows = db.execute(
        select(Booking).where(Booking.field_id == field_id, Booking.end_time > start)
    ).scalars().all()
    return [BookingView.from_row(r) for r in rows]


def propose_booking(
    db: Session,
    actor: Actor,
    *,
    venue_id: int,
    field_id: int,
    description: str,
    start: datetime,
    end: datetime,
    now: datetime | None = None,
) -> BookingView:
    """Reserve `field_id` for [start, end) on behalf of `actor`.

    The check against existing bookings and the insert happen while holding
    the field's lock, so two overlapping proposals can't both be accepted.
    The creator is not added to the roster.
    """
    start = to_utc(start)
    end = to_utc(end)
    now = to_utc(now) if now is not None else utcnow()

    text = _validate_proposal(description, start, end, now)

    with locks.hold(field_key(field_id)), storage_errors(db):
        field = get_field(db, field_id=field_id, venue_id=venue_id, for_update=True)
        if field is None:
            db.rollback()
            raise NotFound(
                "Field or venue not found",
                details={"venue_id": venue_id, "field_id": field_id},
            )

        existing = _bookings_ending_after(db, field_id=field_id, start=start)
        clash = first_conflict(field_id, start, end, existing)
        if clash is not None:
            db.rollback()
            log.info(
                "booking rejected: field_id=%s user_id=%s [%s, %s) overlaps booking_id=%s",
                field_id, actor.user_id, start.isoformat(), end.isoformat(), clash.id,
            )
            raise ScheduleConflict(
                "Field is already booked for this time",
                details={"field_id": field_id, "conflicting_booking_id": clash.id},
            )

        obj = Booking(
            description=text,
            user_id=actor.user_id,
            field_id=field_id,
            start_time=start,
            end_time=end,
        )
        db.add(obj)
        db.commit()
        db.refresh(obj)

    log.info(
        "booking created: id=%s field_id=%s user_id=%s [%s, %s)",
        obj.id, field_id, actor.user_id, start.isoformat(), end.isoformat(),
    )
    return BookingView.from_row(obj)


def require_booking(db: Session, booking_id: int) -> Booking:
    obj = db.execute(select(Booking).where(Booking.id == booking_id)).scalar_one_or_none()
    if obj is None:
        raise NotFound("Booking not found", details={"booking_id": booking_id})
    return obj


def get_booking(db: Session, booking_id: int) -> BookingDetail:
    with storage_errors(db):
        obj = require_booking(db, booking_id)
        rows = db.execute(
            select(User.id, User.name, User.email)
            .join(Membership, Membership.user_id == User.id)
            .where(Membership.booking_id == booking_id)
            .order_by(Membership.id.asc())
        ).all()

    return BookingDetail(
        booking=BookingView.from_row(obj),
        players=[PlayerView(id=r.id, name=r.name, email=r.email) for r in rows],
    )


def list_bookings(db: Session, *, user_id: int | None = None, field_id: int | None = None) -> list[BookingView]:
    """All bookings, optionally narrowed by creator and/or field (filters combine with AND)."""
    stmt = select(Booking)
    if user_id is not None:
        stmt = stmt.where(Booking.user_id == user_id)
    if field_id is not None:
        stmt = stmt.where(Booking.field_id == field_id)

    with storage_errors(db):
        rows = db.execute(stmt.order_by(Booking.start_time.asc(), Booking.id.asc())).scalars().all()
    return [BookingView.from_row(r) for r in rows]
