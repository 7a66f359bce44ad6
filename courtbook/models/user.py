from __future__ import annotations

import uuid

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from courtbook.db.base import Base
from courtbook.models._mixins import TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # Bookings reference members by display name
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")  # pending/approved/blocked
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
