from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from courtbook.core.config import get_settings
from courtbook.core.deps import get_db, require_admin
from courtbook.core.errors import ValidationError
from courtbook.db.store import store_call
from courtbook.models.weekly_block import WeeklyBlock
from courtbook.schemas.weekly_block import WeeklyBlockCreate, WeeklyBlockOut
from courtbook.services.audit_service import write_audit_log
from courtbook.services.block_index import BlockRuleIndex
from courtbook.services.day_service import load_weekly_rules

router = APIRouter()


@router.get("", response_model=list[WeeklyBlockOut])
def list_rules(db: Session = Depends(get_db), user=Depends(require_admin)):
    return load_weekly_rules(db)


@router.post("", response_model=list[WeeklyBlockOut])
def create_rules(payload: WeeklyBlockCreate, request: Request, db: Session = Depends(get_db), user=Depends(require_admin)):
    court_count = len(get_settings().courts)
    court_indices = sorted(set(payload.court_indices))
    unknown = [c for c in court_indices if not 0 <= c < court_count]
    if unknown:
        raise ValidationError(f"Unknown courts: {unknown}")

    index = BlockRuleIndex(load_weekly_rules(db))
    for court_index in court_indices:
        clash = index.find_overlapping_rule(court_index, payload.weekday, payload.from_time, payload.to_time)
        if clash is not None:
            raise ValidationError(
                f"Overlaps existing rule {clash.from_time}-{clash.to_time} on court {court_index}"
            )

    rules = [
        WeeklyBlock(
            court_index=court_index,
            weekday=payload.weekday,
            from_time=payload.from_time,
            to_time=payload.to_time,
            reason=payload.reason,
            created_by_user_id=user.id,
        )
        for court_index in court_indices
    ]
    with store_call(db, "Saving weekly blocks"):
        db.add_all(rules)
        db.commit()
        for r in rules:
            db.refresh(r)

    write_audit_log(
        db,
        actor_user_id=user.id,
        action_type="WEEKLY_BLOCK_CREATE",
        summary=f"Blocked weekday {payload.weekday} {payload.from_time}-{payload.to_time}",
        details={"court_indices": court_indices, "reason": payload.reason},
        request=request,
    )
    return rules


@router.delete("/{rule_id}")
def delete_rule(rule_id: str, request: Request, db: Session = Depends(get_db), user=Depends(require_admin)):
    with store_call(db, "Deleting weekly block"):
        r = db.get(WeeklyBlock, rule_id)
        if r is not None:
            db.delete(r)
            db.commit()
    if r is None:
        raise HTTPException(status_code=404, detail="Not found")

    write_audit_log(db, actor_user_id=user.id, action_type="WEEKLY_BLOCK_DELETE", summary=f"Deleted weekly block {rule_id}", request=request)
    return {"ok": True}
