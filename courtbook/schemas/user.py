from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

UserStatus = Literal["pending", "approved", "blocked"]


class UserStatusUpdate(BaseModel):
    status: UserStatus


class UserOut(BaseModel):
    id: str
    name: str
    status: UserStatus
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True


class MemberSummaryOut(BaseModel):
    name: str
    is_admin: bool
    bookings_this_year: int
    hours_booked_today: float
    max_hours_per_day: float
