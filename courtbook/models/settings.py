from __future__ import annotations

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from courtbook.db.base import Base


class AppSettings(Base):
    __tablename__ = "app_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)

    # Booking quota per member and day
    max_hours_per_day: Mapped[float] = mapped_column(Float, nullable=False, default=2.0)
