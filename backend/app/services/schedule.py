from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.auth.actor import Actor
from app.core.db import storage_errors
from app.core.timeutil import as_utc
from app.models import Booking, Field, Membership, Venue
from app.services.views import BookingView, FieldRef, ScheduledBooking, VenueRef


def my_schedule(db: Session, actor: Actor) -> list[ScheduledBooking]:
    """Bookings the actor has joined, earliest start first.

    Bookings the actor created but never joined are not included. Inner joins
    drop memberships whose booking is gone.
    """
    with storage_errors(db):
        rows = db.execute(
            select(Booking, Field, Venue, Membership.created_at.label("joined_at"))
            .join(Membership, Membership.booking_id == Booking.id)
            .join(Field, Field.id == Booking.field_id)
            .join(Venue, Venue.id == Field.venue_id)
            .where(Membership.user_id == actor.user_id)
            .order_by(Booking.start_time.asc(), Booking.id.asc())
        ).all()

    return [
        ScheduledBooking(
            booking=BookingView.from_row(b),
            field=FieldRef(
                id=f.id,
                name=f.name,
                type=f.type,
                venue=VenueRef(id=v.id, name=v.name, address=v.address),
            ),
            joined_at=as_utc(joined_at),
        )
        for b, f, v, joined_at in rows
    ]
