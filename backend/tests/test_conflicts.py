from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from hypothesis import given, strategies as st

from app.services.conflicts import first_conflict, has_conflict, overlaps

T0 = datetime(2030, 1, 1, tzinfo=timezone.utc)


def at(hour: int, minute: int = 0) -> datetime:
    return T0 + timedelta(hours=hour, minutes=minute)


def booking(field_id: int, start: datetime, end: datetime, id: int = 1):
    return SimpleNamespace(id=id, field_id=field_id, start_time=start, end_time=end)


def test_back_to_back_is_not_a_conflict():
    existing = [booking(1, at(10), at(11))]
    assert not has_conflict(1, at(11), at(12), existing)
    assert not has_conflict(1, at(9), at(10), existing)


def test_partial_overlap_is_a_conflict():
    existing = [booking(1, at(10), at(11))]
    assert has_conflict(1, at(10, 30), at(11, 30), existing)
    assert has_conflict(1, at(9, 30), at(10, 30), existing)


def test_containment_both_ways():
    existing = [booking(1, at(10), at(12))]
    assert has_conflict(1, at(10, 30), at(11), existing)
    assert has_conflict(1, at(9), at(13), existing)
    assert has_conflict(1, at(10), at(12), existing)


def test_other_fields_are_ignored():
    existing = [booking(2, at(10), at(11))]
    assert not has_conflict(1, at(10), at(11), existing)


def test_empty_ledger():
    assert not has_conflict(1, at(10), at(11), [])


def test_first_conflict_returns_the_clashing_booking():
    a = booking(1, at(8), at(9), id=1)
    b = booking(1, at(10), at(11), id=2)
    assert first_conflict(1, at(10, 15), at(10, 45), [a, b]) is b
    assert first_conflict(1, at(12), at(13), [a, b]) is None


minutes = st.integers(min_value=0, max_value=24 * 60)


@st.composite
def intervals(draw):
    start = draw(minutes)
    length = draw(st.integers(min_value=1, max_value=6 * 60))
    return T0 + timedelta(minutes=start), T0 + timedelta(minutes=start + length)


@given(intervals(), intervals())
def test_overlap_matches_disjointness(a, b):
    (a_start, a_end), (b_start, b_end) = a, b
    disjoint = a_end <= b_start or b_end <= a_start
    assert overlaps(a_start, a_end, b_start, b_end) is (not disjoint)
    # symmetric
    assert overlaps(a_start, a_end, b_start, b_end) == overlaps(b_start, b_end, a_start, a_end)


@given(st.lists(intervals(), max_size=8), intervals())
def test_has_conflict_is_any_overlap(existing, candidate):
    rows = [booking(1, s, e, id=i) for i, (s, e) in enumerate(existing)]
    expected = any(overlaps(s, e, *candidate) for s, e in existing)
    assert has_conflict(1, *candidate, rows) is expected
