from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo

from app.core.config import settings


@lru_cache(maxsize=8)
def _zone(name: str):
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Client-supplied datetime -> aware UTC. Naive values are read in DEFAULT_TIMEZONE."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=_zone(settings.DEFAULT_TIMEZONE))
    return value.astimezone(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # some backends (sqlite) hand back naive values for timezone=True columns; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
