from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

from fastapi import Request
from sqlalchemy.orm import Session

from courtbook.db.store import store_call
from courtbook.models.audit_log import AuditLog

logger = logging.getLogger(__name__)

# Bearer tokens are the only secret this service issues
SENSITIVE_KEYS = {"access_token"}


def _sanitize(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        clean: dict[str, Any] = {}
        for k, v in obj.items():
            if k in SENSITIVE_KEYS:
                clean[k] = "<redacted>"
            else:
                clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, date):
        return obj.isoformat()
    return obj


def write_audit_log(
    db: Session,
    *,
    actor_user_id: str | None,
    action_type: str,
    date_key: date | None = None,
    summary: str = "",
    details: Mapping[str, Any] | None = None,
    request: Request | None = None,
) -> None:
    host = ""
    if request is not None and request.client:
        host = request.client.host

    with store_call(db, "Writing audit log"):
        db.add(
            AuditLog(
                actor_user_id=actor_user_id,
                action_type=action_type,
                date_key=date_key,
                summary=summary[:255],
                details_json=_sanitize(dict(details)) if details is not None else None,
                client_host=host,
            )
        )
        db.commit()
    logger.info("%s by %s: %s", action_type, actor_user_id or "-", summary)
