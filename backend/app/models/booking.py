from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db import Base
from app.core.timeutil import utcnow


class Booking(Base):
    """Reservation of a field for [start_time, end_time).

    Column names follow the legacy schema (keterangan, play_date_*).
    """

    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_field_start", "field_id", "play_date_start"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    description: Mapped[str] = mapped_column("keterangan", String(255), nullable=False)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    field_id: Mapped[int] = mapped_column(ForeignKey("fields.id"), index=True)

    start_time: Mapped[datetime] = mapped_column("play_date_start", DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column("play_date_end", DateTime(timezone=True), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
