from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import delete, extract, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courtbook.core.config import get_settings
from courtbook.core.errors import ConflictError, ValidationError
from courtbook.db.store import store_call
from courtbook.models.booking import Booking
from courtbook.models.manual_block import ManualBlock
from courtbook.models.weekly_block import WeeklyBlock
from courtbook.schemas.booking import BookingOut, ManualBlockOut
from courtbook.schemas.weekly_block import WeeklyBlockOut
from courtbook.services.availability import AvailabilityResolver
from courtbook.services.block_index import BlockRuleIndex, ManualSlot
from courtbook.services.booking_flow import Actor, BlockedNotice, BookingFlow, DeletionPrompt, PendingBooking
from courtbook.services.ledger import BookingLedger
from courtbook.services.quota import QuotaTracker
from courtbook.services.settings_service import get_max_hours_per_day

logger = logging.getLogger(__name__)


def _validated(rows, schema, what: str) -> list:
    # Rows that do not fit the schema never reach the engine
    out = []
    for row in rows:
        try:
            out.append(schema.model_validate(row))
        except SchemaValidationError as exc:
            logger.warning("Skipping malformed %s row %s: %s", what, getattr(row, "id", "?"), exc.errors())
    return out


def load_weekly_rules(db: Session) -> list[WeeklyBlockOut]:
    with store_call(db, "Loading weekly blocks"):
        rows = db.execute(select(WeeklyBlock).order_by(WeeklyBlock.court_index, WeeklyBlock.created_at)).scalars().all()
    return _validated(rows, WeeklyBlockOut, "weekly block")


def load_manual_blocks(db: Session, date_key: date) -> list[ManualSlot]:
    with store_call(db, "Loading manual blocks"):
        rows = db.execute(select(ManualBlock).where(ManualBlock.date_key == date_key)).scalars().all()
    return [ManualSlot(b.court_index, b.date_key, b.time) for b in _validated(rows, ManualBlockOut, "manual block")]


def load_bookings(db: Session, date_key: date) -> list[BookingOut]:
    with store_call(db, "Loading bookings"):
        rows = db.execute(select(Booking).where(Booking.date_key == date_key).order_by(Booking.court_index, Booking.time)).scalars().all()
    return _validated(rows, BookingOut, "booking")


@dataclass
class DaySnapshot:
    """Everything the engine needs for one date, read from the store in one go."""

    date_key: date
    courts: list[str]
    index: BlockRuleIndex
    ledger: BookingLedger
    resolver: AvailabilityResolver
    quota: QuotaTracker

    def flow(self, actor: Actor) -> BookingFlow:
        return BookingFlow(self.resolver, self.quota, actor)


def load_day(db: Session, date_key: date) -> DaySnapshot:
    courts = list(get_settings().courts)
    index = BlockRuleIndex(load_weekly_rules(db), load_manual_blocks(db, date_key))
    ledger = BookingLedger(date_key, load_bookings(db, date_key))
    resolver = AvailabilityResolver(index, ledger, court_count=len(courts))
    quota = QuotaTracker(ledger, get_max_hours_per_day(db))
    return DaySnapshot(date_key=date_key, courts=courts, index=index, ledger=ledger, resolver=resolver, quota=quota)


def commit_bookings(db: Session, drafts: list[BookingOut]) -> list[BookingOut]:
    """Insert all drafts as one statement in one transaction."""
    if not drafts:
        return []
    rows = [d.model_dump() for d in drafts]
    try:
        with store_call(db, "Saving bookings"):
            db.execute(insert(Booking), rows)
            db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Booking insert lost a race: %s", exc.orig)
        raise ConflictError("The slot was booked by someone else in the meantime") from exc
    return drafts


def delete_booking(db: Session, *, court_index: int, date_key: date, time: str) -> bool:
    with store_call(db, "Deleting booking"):
        result = db.execute(
            delete(Booking).where(Booking.court_index == court_index, Booking.date_key == date_key, Booking.time == time)
        )
        db.commit()
    return result.rowcount > 0


def press_slot(db: Session, *, date_key: date, actor: Actor, court_index: int, time: str) -> PendingBooking | DeletionPrompt | BlockedNotice:
    return load_day(db, date_key).flow(actor).press(court_index, time)


def book_range(
    db: Session,
    *,
    date_key: date,
    actor: Actor,
    court_index: int,
    start_time: str,
    end_time: str | None = None,
    co_player_name: str | None = None,
) -> list[BookingOut]:
    """Run press and confirm against freshly loaded state, then write."""
    day = load_day(db, date_key)
    flow = day.flow(actor)
    outcome = flow.press(court_index, start_time)
    if not isinstance(outcome, PendingBooking):
        flow.cancel()
        raise ValidationError(f"{start_time} is not free")

    drafts = flow.confirm(end_time=end_time, co_player_name=co_player_name)
    try:
        return commit_bookings(db, drafts)
    except ConflictError as exc:
        fresh = load_day(db, date_key)
        taken = [d.time for d in drafts if fresh.ledger.is_booked(court_index, d.time)]
        if taken:
            raise ConflictError(f"Already booked meanwhile: {', '.join(taken)}") from exc
        raise


def remove_booking(db: Session, *, date_key: date, actor: Actor, court_index: int, time: str) -> BookingOut:
    day = load_day(db, date_key)
    flow = day.flow(actor)
    outcome = flow.press(court_index, time)
    if not isinstance(outcome, DeletionPrompt):
        flow.cancel()
        raise ValidationError(f"No booking at {time} on {day.courts[court_index]}")

    booking = flow.confirm()[0]
    if not delete_booking(db, court_index=court_index, date_key=date_key, time=time):
        raise ConflictError("The booking was already removed")
    return booking


def toggle_manual_block(db: Session, *, date_key: date, court_index: int, time: str, actor_user_id: str | None = None) -> bool:
    """Admin long-press: flip the manual block on one slot."""
    day = load_day(db, date_key)
    day.resolver.check_slot(court_index, time)
    # Removing an existing manual block is always allowed
    if not day.index.is_manually_blocked(court_index, date_key, time):
        if day.index.is_weekly_blocked(court_index, date_key, time):
            raise ValidationError("Slot is blocked by a weekly rule")
        if day.ledger.is_booked(court_index, time):
            raise ValidationError("Slot is booked; delete the booking first")

    blocked = day.index.toggle_manual(court_index, date_key, time)
    try:
        with store_call(db, "Saving manual block"):
            if blocked:
                db.add(ManualBlock(court_index=court_index, date_key=date_key, time=time, created_by_user_id=actor_user_id))
            else:
                db.execute(
                    delete(ManualBlock).where(
                        ManualBlock.court_index == court_index, ManualBlock.date_key == date_key, ManualBlock.time == time
                    )
                )
            db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Manual block changed in the meantime") from exc
    return blocked


def bookings_count_for_year(db: Session, user_name: str, year: int) -> int:
    with store_call(db, "Counting bookings"):
        return db.execute(
            select(func.count(Booking.id)).where(Booking.user_name == user_name, extract("year", Booking.date_key) == year)
        ).scalar_one()
