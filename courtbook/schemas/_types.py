from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, StringConstraints

from courtbook.services.time_grid import is_valid_time_format, slot_index


def _check_time_format(value: str) -> str:
    if not is_valid_time_format(value):
        raise ValueError("time must be HH:MM")
    return value


def _check_slot_time(value: str) -> str:
    _check_time_format(value)
    if slot_index(value) == -1:
        raise ValueError("time is not a slot start")
    return value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


# Any "HH:MM" time of day (rule bounds may sit outside the grid)
TimeOfDay = Annotated[str, AfterValidator(_check_time_format)]
# A slot start on the booking grid
SlotTime = Annotated[str, AfterValidator(_check_slot_time)]
OptionalName = Annotated[Annotated[str, StringConstraints(max_length=255)] | None, AfterValidator(_blank_to_none)]
