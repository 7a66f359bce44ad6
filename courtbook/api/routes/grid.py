from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from courtbook.core.deps import get_actor, get_db
from courtbook.schemas.booking import EndTimesOut, GridOut
from courtbook.services.block_index import weekday_of
from courtbook.services.booking_flow import Actor
from courtbook.services.day_service import load_day

router = APIRouter()


@router.get("", response_model=GridOut)
def get_grid(date_key: date = Query(alias="date"), db: Session = Depends(get_db), actor: Actor = Depends(get_actor)):
    day = load_day(db, date_key)
    return GridOut(
        date_key=date_key,
        weekday=weekday_of(date_key),
        courts=day.courts,
        times=list(day.resolver.slots),
        slots=day.resolver.day_grid(),
        max_hours_per_day=day.quota.max_hours_per_day,
        hours_booked=day.quota.hours_booked_today(actor.name),
    )


@router.get("/end-times", response_model=EndTimesOut)
def get_end_times(
    court: int,
    start: str,
    date_key: date = Query(alias="date"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    day = load_day(db, date_key)
    day.resolver.check_slot(court, start)
    options = day.resolver.available_end_times_from(court, start)
    return EndTimesOut(start_time=start, end_times=options, single_slot_only=not options)
