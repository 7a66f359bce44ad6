from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from courtbook.core.deps import get_actor, get_db
from courtbook.schemas.booking import BookingCommitOut, BookingConfirmRequest, BookingOut, PressOut, SlotRequest
from courtbook.services.audit_service import write_audit_log
from courtbook.services.booking_flow import Actor, BlockedNotice, DeletionPrompt
from courtbook.services.day_service import book_range, load_day, press_slot, remove_booking

router = APIRouter()


@router.post("/press", response_model=PressOut)
def press(payload: SlotRequest, db: Session = Depends(get_db), actor: Actor = Depends(get_actor)):
    outcome = press_slot(db, date_key=payload.date_key, actor=actor, court_index=payload.court_index, time=payload.time)

    if isinstance(outcome, DeletionPrompt):
        b = outcome.booking
        players = b.user_name + (f" / {b.co_player_name}" if b.co_player_name else "")
        return PressOut(kind="DELETE", court_index=b.court_index, time=b.time, booking=b, message=f"Delete this booking? Players: {players}")
    if isinstance(outcome, BlockedNotice):
        return PressOut(kind="BLOCKED", court_index=outcome.court_index, time=outcome.time, message=f"This slot is blocked. Reason: {outcome.reason}")
    return PressOut(
        kind="BOOK",
        court_index=outcome.court_index,
        time=outcome.start_time,
        end_times=outcome.end_times,
        message="Single slot only" if outcome.single_slot_only else "Choose an end time",
    )


@router.post("/confirm", response_model=BookingCommitOut)
def confirm(payload: BookingConfirmRequest, request: Request, db: Session = Depends(get_db), actor: Actor = Depends(get_actor)):
    created = book_range(
        db,
        date_key=payload.date_key,
        actor=actor,
        court_index=payload.court_index,
        start_time=payload.start_time,
        end_time=payload.end_time,
        co_player_name=payload.co_player_name,
    )

    write_audit_log(
        db,
        actor_user_id=actor.user_id,
        action_type="BOOKING_CREATE",
        date_key=payload.date_key,
        summary=f"Booked court {payload.court_index} from {created[0].time} ({len(created)} slot(s))",
        details={"court_index": payload.court_index, "times": [b.time for b in created]},
        request=request,
    )

    day = load_day(db, payload.date_key)
    return BookingCommitOut(bookings=created, hours_booked=day.quota.hours_booked_today(actor.name))


@router.delete("", response_model=BookingOut)
def delete_slot(
    request: Request,
    court: int,
    time: str,
    date_key: date = Query(alias="date"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    removed = remove_booking(db, date_key=date_key, actor=actor, court_index=court, time=time)

    write_audit_log(
        db,
        actor_user_id=actor.user_id,
        action_type="BOOKING_DELETE",
        date_key=date_key,
        summary=f"Deleted booking of {removed.user_name} on court {court} at {time}",
        details={"court_index": court, "time": time, "owner": removed.user_name},
        request=request,
    )
    return removed
