from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from courtbook.core.deps import get_current_user, get_db
from courtbook.models.user import User
from courtbook.schemas.user import MemberSummaryOut
from courtbook.services.day_service import bookings_count_for_year, load_day

router = APIRouter()


@router.get("/summary", response_model=MemberSummaryOut)
def summary(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    today = date.today()
    day = load_day(db, today)
    return MemberSummaryOut(
        name=user.name,
        is_admin=user.is_admin,
        bookings_this_year=bookings_count_for_year(db, user.name, today.year),
        hours_booked_today=day.quota.hours_booked_today(user.name),
        max_hours_per_day=day.quota.max_hours_per_day,
    )
