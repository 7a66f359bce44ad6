from __future__ import annotations

import re

SLOT_MINUTES = 30
SLOT_DURATION_HOURS = SLOT_MINUTES / 60

DAY_START_MINUTES = 8 * 60
# First start that is no longer bookable
DAY_END_MINUTES = 21 * 60

_TIME_RE = re.compile(r"^\d{2}:\d{2}$")


def generate_slots() -> list[str]:
    slots: list[str] = []
    minutes = DAY_START_MINUTES
    while minutes < DAY_END_MINUTES:
        slots.append(f"{minutes // 60:02d}:{minutes % 60:02d}")
        minutes += SLOT_MINUTES
    return slots


TIME_SLOTS: tuple[str, ...] = tuple(generate_slots())


def is_valid_time_format(value: str) -> bool:
    """True for a zero-padded 24h "HH:MM" string."""
    if not isinstance(value, str) or not _TIME_RE.match(value):
        return False
    hh, mm = int(value[:2]), int(value[3:])
    return hh < 24 and mm < 60


def slot_index(time: str) -> int:
    """Position of ``time`` in the grid, -1 if it is not a slot start."""
    try:
        return TIME_SLOTS.index(time)
    except ValueError:
        return -1


def slots_between(start: str, end: str | None = None) -> list[str]:
    """Slot starts in the half-open range [start, end).

    With no end the range is the single slot at ``start``. Unknown times and
    empty ranges give an empty list.
    """
    start_idx = slot_index(start)
    if start_idx == -1:
        return []
    if end is None:
        return [start]

    end_idx = slot_index(end)
    if end_idx <= start_idx:
        return []
    return list(TIME_SLOTS[start_idx:end_idx])
