from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.auth.actor import Actor
from app.core.db import storage_errors
from app.core.exceptions import AlreadyJoined, NotFound, NotJoined
from app.core.locks import locks, membership_key
from app.models import Booking, Membership
from app.services.bookings import require_booking

log = logging.getLogger("playmate.roster")


def _find_membership(db: Session, *, booking_id: int, user_id: int) -> Membership | None:
    return db.execute(
        select(Membership).where(
            Membership.booking_id == booking_id,
            Membership.user_id == user_id,
        )
    ).scalar_one_or_none()


def join_booking(db: Session, actor: Actor, booking_id: int) -> Membership:
    """Add `actor` to the booking's players.

    A second join by the same user is an AlreadyJoined error, not a no-op.
    """
    with locks.hold(membership_key(booking_id, actor.user_id)), storage_errors(db):
        require_booking(db, booking_id)

        if _find_membership(db, booking_id=booking_id, user_id=actor.user_id) is not None:
            db.rollback()
            raise AlreadyJoined(
                "You have already joined this booking",
                details={"booking_id": booking_id},
            )

        mem = Membership(booking_id=booking_id, user_id=actor.user_id)
        db.add(mem)
        try:
            db.commit()
        except IntegrityError:
            # another process won the race on uq_schedules_booking_user, or the booking vanished
            db.rollback()
            if db.get(Booking, booking_id) is None:
                raise NotFound("Booking not found", details={"booking_id": booking_id})
            raise AlreadyJoined(
                "You have already joined this booking",
                details={"booking_id": booking_id},
            )
        db.refresh(mem)

    log.info("joined: booking_id=%s user_id=%s", booking_id, actor.user_id)
    return mem


def unjoin_booking(db: Session, actor: Actor, booking_id: int) -> None:
    with locks.hold(membership_key(booking_id, actor.user_id)), storage_errors(db):
        require_booking(db, booking_id)

        mem = _find_membership(db, booking_id=booking_id, user_id=actor.user_id)
        if mem is None:
            db.rollback()
            raise NotJoined(
                "You have not joined this booking",
                details={"booking_id": booking_id},
            )

        db.delete(mem)
        db.commit()

    log.info("unjoined: booking_id=%s user_id=%s", booking_id, actor.user_id)
