import pytest
from conftest import MONDAY, booking, rule

from courtbook.core.errors import PermissionDeniedError, QuotaExceededError, ValidationError
from courtbook.services.availability import AvailabilityResolver
from courtbook.services.block_index import BlockRuleIndex, ManualSlot
from courtbook.services.booking_flow import Actor, BlockedNotice, BookingFlow, DeletionPrompt, FlowState, PendingBooking
from courtbook.services.ledger import BookingLedger
from courtbook.services.quota import QuotaTracker

ANNA = Actor(user_id="u1", name="anna")
BEN = Actor(user_id="u2", name="ben")
ADMIN = Actor(user_id="u3", name="admin", is_admin=True)


def make_flow(actor, rules=(), manual=(), bookings=(), cap=2.0):
    ledger = BookingLedger(MONDAY, bookings)
    resolver = AvailabilityResolver(BlockRuleIndex(rules, manual), ledger, court_count=3)
    return BookingFlow(resolver, QuotaTracker(ledger, cap), actor)


def test_multi_slot_commit():
    flow = make_flow(ANNA)
    pending = flow.press(0, "09:00")
    assert isinstance(pending, PendingBooking)
    assert flow.state == FlowState.SLOT_SELECTED

    drafts = flow.confirm(end_time="10:30", co_player_name="ben")
    assert [d.time for d in drafts] == ["09:00", "09:30", "10:00"]
    assert {(d.court_index, d.date_key, d.user_name, d.co_player_name) for d in drafts} == {(0, MONDAY, "anna", "ben")}
    assert flow.state == FlowState.COMMITTED
    assert flow.pending is None


def test_single_slot_when_no_end_chosen():
    flow = make_flow(ANNA)
    flow.press(1, "20:30")
    drafts = flow.confirm()
    assert [d.time for d in drafts] == ["20:30"]


def test_single_slot_only_when_next_slot_blocked():
    flow = make_flow(ANNA, manual=[ManualSlot(0, MONDAY, "09:30")])
    pending = flow.press(0, "09:00")
    assert pending.end_times == ["09:30"]
    flow.cancel()

    flow = make_flow(ANNA, bookings=[booking(0, "09:30", "ben")])
    pending = flow.press(0, "09:00")
    assert pending.end_times == ["09:30"]


def test_end_time_must_be_offered():
    flow = make_flow(ANNA, rules=[rule(from_time="10:00", to_time="11:00")])
    flow.press(0, "09:00")
    with pytest.raises(ValidationError):
        flow.confirm(end_time="11:30")
    assert flow.state == FlowState.CANCELLED


def test_quota_rejection_cancels():
    existing = [booking(1, t, "anna") for t in ("12:00", "12:30", "13:00")]
    flow = make_flow(ANNA, bookings=existing)
    flow.press(0, "09:00")
    with pytest.raises(QuotaExceededError):
        flow.confirm(end_time="10:00")
    assert flow.state == FlowState.CANCELLED

    flow = make_flow(ANNA, bookings=existing)
    flow.press(0, "09:00")
    assert len(flow.confirm(end_time="09:30")) == 1


def test_admin_bypasses_quota():
    flow = make_flow(ADMIN, cap=0.5)
    flow.press(0, "09:00")
    assert len(flow.confirm(end_time="11:00")) == 4


def test_pressing_own_booking_offers_deletion():
    flow = make_flow(ANNA, bookings=[booking(0, "09:00", "anna")])
    prompt = flow.press(0, "09:00")
    assert isinstance(prompt, DeletionPrompt)
    assert flow.state == FlowState.DELETE_PENDING
    assert flow.confirm()[0].time == "09:00"
    assert flow.state == FlowState.COMMITTED


def test_pressing_foreign_booking():
    bookings = [booking(0, "09:00", "anna")]
    flow = make_flow(BEN, bookings=bookings)
    with pytest.raises(PermissionDeniedError):
        flow.press(0, "09:00")
    assert flow.state == FlowState.IDLE

    flow = make_flow(ADMIN, bookings=bookings)
    assert isinstance(flow.press(0, "09:00"), DeletionPrompt)


def test_blocked_slot():
    rules = [rule(from_time="18:00", to_time="20:00", reason="League")]
    flow = make_flow(ANNA, rules=rules)
    with pytest.raises(PermissionDeniedError) as exc:
        flow.press(0, "18:00")
    assert "League" in exc.value.detail

    flow = make_flow(ADMIN, rules=rules)
    notice = flow.press(0, "18:00")
    assert isinstance(notice, BlockedNotice)
    assert notice.reason == "League"
    assert flow.state == FlowState.IDLE
    with pytest.raises(ValidationError):
        flow.confirm()


def test_cancel_discards_pending_range():
    flow = make_flow(ANNA)
    flow.press(0, "09:00")
    flow.cancel()
    assert flow.state == FlowState.CANCELLED
    assert flow.pending is None
    with pytest.raises(ValidationError):
        flow.confirm()


def test_press_while_pending_cancels():
    flow = make_flow(ANNA)
    flow.press(0, "09:00")
    with pytest.raises(ValidationError):
        flow.press(1, "09:00")
    assert flow.state == FlowState.CANCELLED
    # A fresh press works again afterwards
    assert isinstance(flow.press(1, "09:00"), PendingBooking)


def test_press_rejects_off_grid_slot():
    flow = make_flow(ANNA)
    with pytest.raises(ValidationError):
        flow.press(0, "21:00")
    with pytest.raises(ValidationError):
        flow.press(5, "09:00")
