from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from courtbook.core.deps import get_db, require_admin
from courtbook.db.store import store_call
from courtbook.schemas.settings import MaxHoursStep, SettingsOut, SettingsUpdate
from courtbook.services.audit_service import write_audit_log
from courtbook.services.settings_service import get_or_create_settings, set_max_hours_per_day, step_max_hours_per_day

router = APIRouter()


@router.get("", response_model=SettingsOut)
def get_settings(db: Session = Depends(get_db), user=Depends(require_admin)):
    with store_call(db, "Loading settings"):
        return get_or_create_settings(db)


@router.patch("", response_model=SettingsOut)
def update_settings(payload: SettingsUpdate, request: Request, db: Session = Depends(get_db), user=Depends(require_admin)):
    s = set_max_hours_per_day(db, payload.max_hours_per_day)

    write_audit_log(
        db,
        actor_user_id=user.id,
        action_type="SETTINGS_UPDATE",
        summary="Updated max hours per day",
        details={"max_hours_per_day": s.max_hours_per_day},
        request=request,
    )
    return s


@router.post("/max-hours/step", response_model=SettingsOut)
def step_max_hours(payload: MaxHoursStep, request: Request, db: Session = Depends(get_db), user=Depends(require_admin)):
    s = step_max_hours_per_day(db, payload.delta)

    write_audit_log(
        db,
        actor_user_id=user.id,
        action_type="SETTINGS_UPDATE",
        summary=f"Stepped max hours per day by {payload.delta:+g}",
        details={"max_hours_per_day": s.max_hours_per_day},
        request=request,
    )
    return s
