"""Read models returned by the booking services.

Plain frozen dataclasses built from explicit queries; they hold ids, not
ORM objects, so nothing lazy-loads after the session closes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from app.core.timeutil import as_utc
from app.models import Booking


@dataclass(frozen=True)
class BookingView:
    id: int
    description: str
    user_id: int
    field_id: int
    start_time: datetime
    end_time: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, b: Booking) -> "BookingView":
        return cls(
            id=b.id,
            description=b.description,
            user_id=b.user_id,
            field_id=b.field_id,
            start_time=as_utc(b.start_time),
            end_time=as_utc(b.end_time),
            created_at=as_utc(b.created_at),
            updated_at=as_utc(b.updated_at),
        )


@dataclass(frozen=True)
class PlayerView:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class BookingDetail:
    booking: BookingView
    players: list[PlayerView] = field(default_factory=list)

    @property
    def players_count(self) -> int:
        return len(self.players)


@dataclass(frozen=True)
class VenueRef:
    id: int
    name: str
    address: str


@dataclass(frozen=True)
class FieldRef:
    id: int
    name: str
    type: str
    venue: VenueRef


@dataclass(frozen=True)
class ScheduledBooking:
    booking: BookingView
    field: FieldRef
    joined_at: datetime
