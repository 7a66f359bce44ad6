from __future__ import annotations

import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from courtbook.db.base import Base
from courtbook.models._mixins import TimestampMixin


class WeeklyBlock(Base, TimestampMixin):
    __tablename__ = "weekly_blocks"
    __table_args__ = (
        CheckConstraint("weekday >= 0 AND weekday <= 6", name="weekly_blocks_weekday_range"),
        CheckConstraint("from_time < to_time", name="weekly_blocks_from_before_to"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    court_index: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # 0=Sunday .. 6=Saturday
    weekday: Mapped[int] = mapped_column(Integer, nullable=False)

    # "HH:MM", half-open [from_time, to_time)
    from_time: Mapped[str] = mapped_column(String(5), nullable=False)
    to_time: Mapped[str] = mapped_column(String(5), nullable=False)

    reason: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_by_user_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("users.id"), nullable=True)
