from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from app.auth.actor import Actor
from app.auth.guards import require_member, require_player
from app.core.db import get_db
from app.services.bookings import DESCRIPTION_MAX_LENGTH, get_booking, list_bookings, propose_booking
from app.services.roster import join_booking, unjoin_booking
from app.services.schedule import my_schedule
from app.services.views import BookingView, ScheduledBooking

router = APIRouter(tags=["bookings"])


# ---------- Schemas ----------

class BookingCreateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    field_id: int = Field(..., gt=0, alias="fieldId")
    # emptiness is checked by the service so it is reported as ValidationFailed
    description: str = Field(..., max_length=DESCRIPTION_MAX_LENGTH, alias="keterangan")
    play_date_start: datetime
    play_date_end: datetime


# ---------- Helpers ----------

def _booking_payload(v: BookingView) -> dict:
    return {
        "id": v.id,
        "description": v.description,
        "user_id": v.user_id,
        "field_id": v.field_id,
        "play_date_start": v.start_time.isoformat(),
        "play_date_end": v.end_time.isoformat(),
        "created_at": v.created_at.isoformat(),
        "updated_at": v.updated_at.isoformat(),
    }


def _scheduled_payload(s: ScheduledBooking) -> dict:
    return {
        **_booking_payload(s.booking),
        "joined_at": s.joined_at.isoformat(),
        "field": {
            "id": s.field.id,
            "name": s.field.name,
            "type": s.field.type,
            "venue": {
                "id": s.field.venue.id,
                "name": s.field.venue.name,
                "address": s.field.venue.address,
            },
        },
    }


# ---------- Bookings ----------

@router.post("/venues/{venue_id}/bookings", status_code=status.HTTP_201_CREATED)
def create_booking(
    venue_id: int,
    payload: BookingCreateIn,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_player),
):
    """Book a field of the venue for [play_date_start, play_date_end)."""
    booking = propose_booking(
        db,
        actor,
        venue_id=venue_id,
        field_id=payload.field_id,
        description=payload.description,
        start=payload.play_date_start,
        end=payload.play_date_end,
    )
    return {"id": booking.id}


@router.get("/bookings")
def get_bookings(
    user_id: int | None = Query(default=None, gt=0),
    field_id: int | None = Query(default=None, gt=0),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_member),
):
    rows = list_bookings(db, user_id=user_id, field_id=field_id)
    return [_booking_payload(v) for v in rows]


@router.get("/bookings/{booking_id}")
def get_booking_detail(
    booking_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_member),
):
    detail = get_booking(db, booking_id)
    return {
        **_booking_payload(detail.booking),
        "players_count": detail.players_count,
        "players": [{"id": p.id, "name": p.name, "email": p.email} for p in detail.players],
    }


# ---------- Roster ----------

@router.put("/bookings/{booking_id}/join", status_code=status.HTTP_201_CREATED)
def join(
    booking_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_player),
):
    join_booking(db, actor, booking_id)
    return {"ok": True}


@router.put("/bookings/{booking_id}/unjoin")
def unjoin(
    booking_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_player),
):
    unjoin_booking(db, actor, booking_id)
    return {"ok": True}


# ---------- My schedule ----------

@router.get("/schedules")
def schedules(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_player),
):
    """Bookings the current user has joined, earliest first."""
    return [_scheduled_payload(s) for s in my_schedule(db, actor)]
