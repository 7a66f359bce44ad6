from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from courtbook.core.errors import PermissionDeniedError, QuotaExceededError, ValidationError
from courtbook.schemas.booking import BookingOut
from courtbook.services.availability import AvailabilityResolver
from courtbook.services.quota import QuotaTracker
from courtbook.services.time_grid import slots_between

logger = logging.getLogger(__name__)


class FlowState(str, enum.Enum):
    IDLE = "IDLE"
    SLOT_SELECTED = "SLOT_SELECTED"
    DELETE_PENDING = "DELETE_PENDING"
    COMMITTED = "COMMITTED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Actor:
    user_id: str
    name: str
    is_admin: bool = False


@dataclass(frozen=True)
class PendingBooking:
    court_index: int
    start_time: str
    end_times: list[str] = field(default_factory=list)

    @property
    def single_slot_only(self) -> bool:
        return not self.end_times


@dataclass(frozen=True)
class DeletionPrompt:
    booking: BookingOut


@dataclass(frozen=True)
class BlockedNotice:
    court_index: int
    time: str
    reason: str


class BookingFlow:
    """One slot press taken through to commit or cancel.

    IDLE -> SLOT_SELECTED | DELETE_PENDING -> COMMITTED | CANCELLED.
    Rejections raise a BookingError and leave no pending state behind.
    """

    def __init__(self, resolver: AvailabilityResolver, quota: QuotaTracker, actor: Actor):
        self.resolver = resolver
        self.quota = quota
        self.actor = actor
        self.state = FlowState.IDLE
        self._pending: PendingBooking | DeletionPrompt | None = None

    @property
    def pending(self) -> PendingBooking | DeletionPrompt | None:
        return self._pending

    def press(self, court_index: int, time: str) -> PendingBooking | DeletionPrompt | BlockedNotice:
        if self.state in (FlowState.SLOT_SELECTED, FlowState.DELETE_PENDING):
            self.cancel()
            raise ValidationError("Another selection was still pending and has been discarded")
        self.state = FlowState.IDLE
        self._pending = None

        self.resolver.check_slot(court_index, time)

        existing = self.resolver.ledger.get(court_index, time)
        if existing is not None:
            if existing.user_name != self.actor.name and not self.actor.is_admin:
                raise PermissionDeniedError("This slot is booked by someone else. Only admins can change other members' bookings.")
            prompt = DeletionPrompt(booking=existing)
            self._pending = prompt
            self.state = FlowState.DELETE_PENDING
            return prompt

        if self.resolver.is_blocked(court_index, time):
            reason = self.resolver.index.block_reason(court_index, self.resolver.date_key, time) or ""
            if not self.actor.is_admin:
                raise PermissionDeniedError(f"This slot is blocked ({reason}). Only admins can edit blocked times.")
            return BlockedNotice(court_index=court_index, time=time, reason=reason)

        pending = PendingBooking(
            court_index=court_index,
            start_time=time,
            end_times=self.resolver.available_end_times_from(court_index, time),
        )
        self._pending = pending
        self.state = FlowState.SLOT_SELECTED
        return pending

    def confirm(self, end_time: str | None = None, co_player_name: str | None = None) -> list[BookingOut]:
        """Finish the pending decision.

        For a booking returns the records to insert; for a deletion returns the
        single booking to remove.
        """
        pending = self._pending
        if self.state == FlowState.DELETE_PENDING and isinstance(pending, DeletionPrompt):
            self._finish(FlowState.COMMITTED)
            return [pending.booking]

        if self.state != FlowState.SLOT_SELECTED or not isinstance(pending, PendingBooking):
            raise ValidationError("Nothing to confirm")

        if end_time is not None and end_time not in pending.end_times:
            self.cancel()
            raise ValidationError(f"{end_time} is not a valid end time for a booking starting at {pending.start_time}")

        times = slots_between(pending.start_time, end_time)
        if not times:
            self.cancel()
            raise ValidationError("End time must be after start time")

        try:
            self.quota.check(self.actor.name, len(times), is_admin=self.actor.is_admin)
        except QuotaExceededError:
            self.cancel()
            raise

        drafts = [
            BookingOut(
                court_index=pending.court_index,
                date_key=self.resolver.date_key,
                time=t,
                user_name=self.actor.name,
                co_player_name=co_player_name,
            )
            for t in times
        ]
        self._finish(FlowState.COMMITTED)
        logger.debug("Built %d booking(s) for %s on court %d", len(drafts), self.actor.name, pending.court_index)
        return drafts

    def cancel(self) -> None:
        self._finish(FlowState.CANCELLED)

    def _finish(self, state: FlowState) -> None:
        self.state = state
        self._pending = None
