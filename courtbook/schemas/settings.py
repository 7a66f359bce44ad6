from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SettingsOut(BaseModel):
    max_hours_per_day: float

    class Config:
        from_attributes = True


class SettingsUpdate(BaseModel):
    max_hours_per_day: float = Field(ge=0.5, le=8.0)

    @field_validator("max_hours_per_day")
    @classmethod
    def _half_hour_steps(cls, v: float) -> float:
        if round(v * 2) != v * 2:
            raise ValueError("max_hours_per_day must be a multiple of 0.5")
        return v


class MaxHoursStep(BaseModel):
    delta: float = Field(ge=-8.0, le=8.0)
