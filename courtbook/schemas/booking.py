from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from courtbook.schemas._types import OptionalName, SlotTime


class BookingOut(BaseModel):
    court_index: int = Field(ge=0)
    date_key: date
    time: SlotTime
    user_name: str = Field(min_length=1)
    co_player_name: OptionalName = None

    class Config:
        from_attributes = True


class ManualBlockOut(BaseModel):
    court_index: int = Field(ge=0)
    date_key: date
    time: SlotTime

    class Config:
        from_attributes = True


class SlotRequest(BaseModel):
    date_key: date
    court_index: int = Field(ge=0)
    time: SlotTime


class BookingConfirmRequest(BaseModel):
    date_key: date
    court_index: int = Field(ge=0)
    start_time: SlotTime
    end_time: SlotTime | None = None
    co_player_name: OptionalName = None


class SlotView(BaseModel):
    court_index: int
    time: str
    status: str  # FREE/BOOKED/BLOCKED
    user_name: str | None = None
    co_player_name: str | None = None
    block_reason: str | None = None
    manually_blocked: bool = False


class GridOut(BaseModel):
    date_key: date
    weekday: int
    courts: list[str]
    times: list[str]
    slots: list[SlotView]
    max_hours_per_day: float
    hours_booked: float


class EndTimesOut(BaseModel):
    start_time: str
    end_times: list[str]
    single_slot_only: bool


class PressOut(BaseModel):
    kind: str  # BOOK/DELETE/BLOCKED
    court_index: int
    time: str
    end_times: list[str] = Field(default_factory=list)
    booking: BookingOut | None = None
    message: str = ""


class BookingCommitOut(BaseModel):
    bookings: list[BookingOut]
    hours_booked: float
