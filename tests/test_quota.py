import pytest
from conftest import MONDAY, booking

from courtbook.core.errors import QuotaExceededError
from courtbook.services.ledger import BookingLedger
from courtbook.services.quota import QuotaTracker


@pytest.fixture
def tracker():
    ledger = BookingLedger(
        MONDAY,
        [
            booking(0, "09:00", "anna"),
            booking(0, "09:30", "anna"),
            booking(1, "12:00", "anna"),
            booking(2, "12:00", "ben"),
        ],
    )
    return QuotaTracker(ledger, 2.0)


def test_hours_booked_today(tracker):
    assert tracker.hours_booked_today("anna") == 1.5
    assert tracker.hours_booked_today("ben") == 0.5
    assert tracker.hours_booked_today("carla") == 0.0


def test_would_exceed_is_strict(tracker):
    assert tracker.would_exceed("anna", 1, 2.0) is False
    assert tracker.would_exceed("anna", 2, 2.0) is True
    assert tracker.would_exceed("anna", 2, 2.5) is False


def test_check_raises_with_cap(tracker):
    with pytest.raises(QuotaExceededError) as exc:
        tracker.check("anna", 2)
    assert exc.value.cap == 2.0
    assert exc.value.status_code == 400
    assert "2 hours" in exc.value.detail


def test_admins_are_exempt(tracker):
    tracker.check("anna", 10, is_admin=True)
