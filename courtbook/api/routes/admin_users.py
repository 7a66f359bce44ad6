from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.orm import Session

from courtbook.core.deps import get_db, require_admin
from courtbook.db.store import store_call
from courtbook.models.user import User
from courtbook.schemas.user import UserOut, UserStatusUpdate
from courtbook.services.audit_service import write_audit_log

router = APIRouter()


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db), user=Depends(require_admin)):
    with store_call(db, "Loading users"):
        return db.execute(select(User).order_by(User.created_at)).scalars().all()


@router.patch("/{user_id}/status", response_model=UserOut)
def update_status(user_id: str, payload: UserStatusUpdate, request: Request, db: Session = Depends(get_db), user=Depends(require_admin)):
    with store_call(db, "Loading user"):
        u = db.get(User, user_id)
    if not u:
        raise HTTPException(status_code=404, detail="Not found")
    if u.id == user.id and payload.status != "approved":
        raise HTTPException(status_code=400, detail="Admins cannot lock themselves out")

    previous = u.status
    with store_call(db, "Saving user status"):
        u.status = payload.status
        db.commit()
        db.refresh(u)

    write_audit_log(
        db,
        actor_user_id=user.id,
        action_type="USER_STATUS_UPDATE",
        summary=f"{u.name}: {previous} -> {u.status}",
        details={"user_id": u.id, "from": previous, "to": u.status},
        request=request,
    )
    return u
