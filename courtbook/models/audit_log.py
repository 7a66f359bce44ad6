from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from courtbook.db.base import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    actor_user_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("users.id"), nullable=True)

    # BOOKING_CREATE, BOOKING_DELETE, WEEKLY_BLOCK_CREATE, MANUAL_BLOCK_TOGGLE, ...
    action_type: Mapped[str] = mapped_column(String(64), nullable=False)
    # Booking day the action touched, if any
    date_key: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)

    summary: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    details_json: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    client_host: Mapped[str] = mapped_column(String(64), nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
