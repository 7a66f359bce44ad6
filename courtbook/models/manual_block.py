from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from courtbook.db.base import Base
from courtbook.models._mixins import TimestampMixin


class ManualBlock(Base, TimestampMixin):
    __tablename__ = "manual_blocks"
    __table_args__ = (UniqueConstraint("court_index", "date_key", "time", name="manual_blocks_slot_unique"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    court_index: Mapped[int] = mapped_column(Integer, nullable=False)
    date_key: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[str] = mapped_column(String(5), nullable=False)

    created_by_user_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("users.id"), nullable=True)
