"""Half-open interval overlap checks for field bookings."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Protocol


class Interval(Protocol):
    field_id: int
    start_time: datetime
    end_time: datetime


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """[a_start, a_end) and [b_start, b_end) share at least one instant.

    Back-to-back intervals (a_end == b_start) do not overlap.
    """
    return a_start < b_end and b_start < a_end


def has_conflict(
    field_id: int,
    candidate_start: datetime,
    candidate_end: datetime,
    existing: Iterable[Interval],
) -> bool:
    for b in existing:
        if b.field_id != field_id:
            continue
        if overlaps(b.start_time, b.end_time, candidate_start, candidate_end):
            return True
    return False


def first_conflict(
    field_id: int,
    candidate_start: datetime,
    candidate_end: datetime,
    existing: Iterable[Interval],
) -> Interval | None:
    """Same test as has_conflict, but returns the clashing booking."""
    for b in existing:
        if b.field_id == field_id and overlaps(b.start_time, b.end_time, candidate_start, candidate_end):
            return b
    return None
