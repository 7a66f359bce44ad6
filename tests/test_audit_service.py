from unittest.mock import MagicMock

import pytest
from conftest import MONDAY
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from courtbook.core.errors import TransportError
from courtbook.models.audit_log import AuditLog
from courtbook.services.audit_service import write_audit_log


def test_writes_row_and_redacts_tokens(db):
    write_audit_log(
        db,
        actor_user_id="u1",
        action_type="BOOKING_CREATE",
        date_key=MONDAY,
        summary="Booked 09:00",
        details={"court_index": 0, "access_token": "eyJ...", "when": MONDAY},
    )

    row = db.execute(select(AuditLog)).scalar_one()
    assert row.action_type == "BOOKING_CREATE"
    assert row.details_json == {"court_index": 0, "access_token": "<redacted>", "when": "2026-10-19"}


def test_store_failure_becomes_transport_error():
    session = MagicMock()
    session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

    with pytest.raises(TransportError) as exc:
        write_audit_log(session, actor_user_id=None, action_type="SETTINGS_UPDATE")

    assert "disk full" in exc.value.detail
    session.rollback.assert_called_once()
