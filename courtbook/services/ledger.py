from __future__ import annotations

from datetime import date
from typing import Iterable

from courtbook.core.errors import ValidationError
from courtbook.schemas.booking import BookingOut


class BookingLedger:
    """Bookings of the single date currently being looked at.

    Built wholesale from persisted rows; never patched in place.
    """

    def __init__(self, date_key: date, bookings: Iterable[BookingOut] = ()):
        self.date_key = date_key
        self._by_slot: dict[tuple[int, str], BookingOut] = {}
        for b in bookings:
            if b.date_key != date_key:
                raise ValidationError(f"Booking for {b.date_key} does not belong to ledger of {date_key}")
            key = (b.court_index, b.time)
            if key in self._by_slot:
                raise ValidationError(f"Duplicate booking for court {b.court_index} at {b.time}")
            self._by_slot[key] = b

    def __len__(self) -> int:
        return len(self._by_slot)

    def __iter__(self):
        return iter(sorted(self._by_slot.values(), key=lambda b: (b.court_index, b.time)))

    def is_booked(self, court_index: int, time: str) -> bool:
        return (court_index, time) in self._by_slot

    def get(self, court_index: int, time: str) -> BookingOut | None:
        return self._by_slot.get((court_index, time))

    def for_user(self, user_name: str) -> list[BookingOut]:
        return [b for b in self if b.user_name == user_name]
