from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from courtbook.schemas._types import OptionalName, TimeOfDay


class WeeklyBlockCreate(BaseModel):
    court_indices: list[int] = Field(min_length=1)
    weekday: int = Field(ge=0, le=6)  # 0=Sunday
    from_time: TimeOfDay
    to_time: TimeOfDay
    reason: OptionalName = None

    @model_validator(mode="after")
    def _check_range(self):
        if self.to_time <= self.from_time:
            raise ValueError("to_time must be after from_time")
        return self


class WeeklyBlockOut(BaseModel):
    id: str
    court_index: int = Field(ge=0)
    weekday: int = Field(ge=0, le=6)
    from_time: TimeOfDay
    to_time: TimeOfDay
    reason: OptionalName = None

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def _check_range(self):
        if self.to_time <= self.from_time:
            raise ValueError("to_time must be after from_time")
        return self
