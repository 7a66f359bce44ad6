from __future__ import annotations

from courtbook.core.errors import QuotaExceededError
from courtbook.services.ledger import BookingLedger
from courtbook.services.time_grid import SLOT_DURATION_HOURS


class QuotaTracker:
    def __init__(self, ledger: BookingLedger, max_hours_per_day: float):
        self.ledger = ledger
        self.max_hours_per_day = max_hours_per_day

    def hours_booked_today(self, user_name: str) -> float:
        return len(self.ledger.for_user(user_name)) * SLOT_DURATION_HOURS

    def would_exceed(self, user_name: str, additional_slots: int, cap: float | None = None) -> bool:
        if cap is None:
            cap = self.max_hours_per_day
        return self.hours_booked_today(user_name) + additional_slots * SLOT_DURATION_HOURS > cap

    def check(self, user_name: str, additional_slots: int, *, is_admin: bool = False) -> None:
        # Admins are never limited
        if is_admin:
            return
        if self.would_exceed(user_name, additional_slots):
            raise QuotaExceededError(self.max_hours_per_day)
