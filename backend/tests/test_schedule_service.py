from datetime import timedelta

from sqlalchemy import text

from app.services.bookings import propose_booking
from app.services.roster import join_booking, unjoin_booking
from app.services.schedule import my_schedule
from conftest import actor_of, make_field, make_user


def _book(db, creator, field, start, hours=1):
    return propose_booking(
        db,
        actor_of(creator),
        venue_id=field.venue_id,
        field_id=field.id,
        description="main bareng",
        start=start,
        end=start + timedelta(hours=hours),
    )


def test_schedule_is_ordered_and_expanded(db, user, field, base_time):
    player = actor_of(make_user(db, name="Joko"))
    late = _book(db, user, field, base_time + timedelta(hours=5))
    mid = _book(db, user, field, base_time + timedelta(hours=2))
    join_booking(db, player, late.id)
    join_booking(db, player, mid.id)

    rows = my_schedule(db, player)
    assert [r.booking.id for r in rows] == [mid.id, late.id]

    first = rows[0]
    assert first.field.id == field.id
    assert first.field.name == field.name
    assert first.field.type == "futsal"
    assert first.field.venue.name == "GOR Senayan"
    assert first.field.venue.address == "Jl. Pintu Satu"

    # joining something earlier moves it to the front
    early = _book(db, user, field, base_time)
    join_booking(db, player, early.id)
    assert [r.booking.id for r in my_schedule(db, player)] == [early.id, mid.id, late.id]


def test_created_but_not_joined_is_excluded(db, user, field, base_time):
    _book(db, user, field, base_time)
    assert my_schedule(db, actor_of(user)) == []


def test_only_own_memberships(db, user, field, base_time):
    other_field = make_field(db, name="Court X")
    a = actor_of(make_user(db, name="Kiki"))
    b = actor_of(make_user(db, name="Lina"))
    one = _book(db, user, field, base_time)
    two = _book(db, user, other_field, base_time)
    join_booking(db, a, one.id)
    join_booking(db, b, two.id)

    assert [r.booking.id for r in my_schedule(db, a)] == [one.id]
    assert [r.booking.id for r in my_schedule(db, b)] == [two.id]


def test_unjoined_booking_leaves_schedule(db, user, field, base_time):
    player = actor_of(make_user(db, name="Maya"))
    b = _book(db, user, field, base_time)
    join_booking(db, player, b.id)
    unjoin_booking(db, player, b.id)
    assert my_schedule(db, player) == []


def test_orphaned_memberships_are_not_returned(db, user, field, base_time):
    player = actor_of(make_user(db, name="Nina"))
    b = _book(db, user, field, base_time)
    join_booking(db, player, b.id)

    # simulate a delete that bypassed the cascade
    db.execute(text("PRAGMA foreign_keys=OFF"))
    db.execute(text("DELETE FROM bookings WHERE id = :id"), {"id": b.id})
    db.commit()
    db.execute(text("PRAGMA foreign_keys=ON"))

    assert my_schedule(db, player) == []
