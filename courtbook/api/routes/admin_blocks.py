from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from courtbook.core.deps import get_db, require_admin
from courtbook.schemas.booking import SlotRequest
from courtbook.services.audit_service import write_audit_log
from courtbook.services.day_service import toggle_manual_block

router = APIRouter()


class ManualBlockToggled(BaseModel):
    court_index: int
    time: str
    blocked: bool


@router.post("/toggle", response_model=ManualBlockToggled)
def toggle(payload: SlotRequest, request: Request, db: Session = Depends(get_db), user=Depends(require_admin)):
    blocked = toggle_manual_block(
        db, date_key=payload.date_key, court_index=payload.court_index, time=payload.time, actor_user_id=user.id
    )

    write_audit_log(
        db,
        actor_user_id=user.id,
        action_type="MANUAL_BLOCK_TOGGLE",
        date_key=payload.date_key,
        summary=f"{'Blocked' if blocked else 'Unblocked'} court {payload.court_index} at {payload.time}",
        request=request,
    )
    return ManualBlockToggled(court_index=payload.court_index, time=payload.time, blocked=blocked)
