from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from courtbook.core.config import get_settings
from courtbook.db.store import store_call
from courtbook.models.settings import AppSettings

logger = logging.getLogger(__name__)


def get_or_create_settings(db: Session) -> AppSettings:
    s = db.get(AppSettings, 1)
    if s is None:
        s = AppSettings(id=1, max_hours_per_day=get_settings().default_max_hours_per_day)
        db.add(s)
        db.commit()
        db.refresh(s)
    return s


def get_max_hours_per_day(db: Session) -> float:
    """Daily quota in hours, falling back to the configured default."""
    default = get_settings().default_max_hours_per_day
    try:
        value = get_or_create_settings(db).max_hours_per_day
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Could not load max_hours_per_day, using default %s: %s", default, exc)
        return default
    if value is None or value <= 0:
        logger.warning("Stored max_hours_per_day %r is invalid, using default %s", value, default)
        return default
    return float(value)


def clamp_max_hours(value: float) -> float:
    settings = get_settings()
    step = settings.max_hours_step
    value = min(max(value, settings.min_max_hours_per_day), settings.max_max_hours_per_day)
    return round(round(value / step) * step, 1)


def set_max_hours_per_day(db: Session, value: float) -> AppSettings:
    with store_call(db, "Saving settings"):
        s = get_or_create_settings(db)
        s.max_hours_per_day = clamp_max_hours(value)
        db.commit()
        db.refresh(s)
    logger.info("max_hours_per_day set to %s", s.max_hours_per_day)
    return s


def step_max_hours_per_day(db: Session, delta: float) -> AppSettings:
    with store_call(db, "Loading settings"):
        s = get_or_create_settings(db)
    return set_max_hours_per_day(db, s.max_hours_per_day + delta)
