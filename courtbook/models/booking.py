from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from courtbook.db.base import Base
from courtbook.models._mixins import TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"
    # One booking per slot; lost races surface as IntegrityError on insert
    __table_args__ = (UniqueConstraint("court_index", "date_key", "time", name="bookings_slot_unique"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    court_index: Mapped[int] = mapped_column(Integer, nullable=False)
    date_key: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[str] = mapped_column(String(5), nullable=False)

    user_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    co_player_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
