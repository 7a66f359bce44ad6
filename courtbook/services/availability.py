from __future__ import annotations

import enum
from typing import Sequence

from courtbook.core.errors import ValidationError
from courtbook.schemas.booking import SlotView
from courtbook.services.block_index import BlockRuleIndex
from courtbook.services.ledger import BookingLedger
from courtbook.services.time_grid import TIME_SLOTS


class SlotStatus(str, enum.Enum):
    FREE = "FREE"
    BOOKED = "BOOKED"
    BLOCKED = "BLOCKED"


class AvailabilityResolver:
    """Classifies the slots of one date by combining blocks and bookings."""

    def __init__(
        self,
        index: BlockRuleIndex,
        ledger: BookingLedger,
        court_count: int,
        slots: Sequence[str] = TIME_SLOTS,
    ):
        self.index = index
        self.ledger = ledger
        self.court_count = court_count
        self.slots = tuple(slots)

    @property
    def date_key(self):
        return self.ledger.date_key

    def check_slot(self, court_index: int, time: str) -> None:
        if not 0 <= court_index < self.court_count:
            raise ValidationError(f"Unknown court {court_index}")
        if time not in self.slots:
            raise ValidationError(f"{time} is not a bookable slot")

    def is_blocked(self, court_index: int, time: str) -> bool:
        return self.index.is_blocked(court_index, self.date_key, time)

    def is_booked(self, court_index: int, time: str) -> bool:
        return self.ledger.is_booked(court_index, time)

    def classify(self, court_index: int, time: str) -> SlotStatus:
        if self.is_blocked(court_index, time):
            return SlotStatus.BLOCKED
        if self.is_booked(court_index, time):
            return SlotStatus.BOOKED
        return SlotStatus.FREE

    def available_end_times_from(self, court_index: int, start_time: str) -> list[str]:
        """End-time choices for a contiguous run beginning at ``start_time``.

        Each option is the start of the slot after the last one booked. The walk
        stops at the first booked or blocked slot, so one obstruction truncates
        everything behind it. An empty result means only the start slot itself
        can be booked.
        """
        try:
            start_idx = self.slots.index(start_time)
        except ValueError:
            return []

        options: list[str] = []
        idx = start_idx + 1
        while idx < len(self.slots):
            prev_time = self.slots[idx - 1]
            if self.is_blocked(court_index, prev_time) or self.is_booked(court_index, prev_time):
                break
            options.append(self.slots[idx])
            idx += 1
        return options

    def slot_view(self, court_index: int, time: str) -> SlotView:
        status = self.classify(court_index, time)
        booking = self.ledger.get(court_index, time)
        return SlotView(
            court_index=court_index,
            time=time,
            status=status.value,
            user_name=booking.user_name if booking else None,
            co_player_name=booking.co_player_name if booking else None,
            block_reason=self.index.block_reason(court_index, self.date_key, time),
            manually_blocked=self.index.is_manually_blocked(court_index, self.date_key, time),
        )

    def day_grid(self) -> list[SlotView]:
        return [self.slot_view(court_index, time) for time in self.slots for court_index in range(self.court_count)]
