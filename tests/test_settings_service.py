from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from courtbook.core.errors import TransportError
from courtbook.services import settings_service


def test_defaults_to_two_hours(db):
    assert settings_service.get_max_hours_per_day(db) == 2.0


def test_falls_back_when_store_fails():
    session = MagicMock()
    session.get.side_effect = OperationalError("SELECT", {}, Exception("timeout"))
    assert settings_service.get_max_hours_per_day(session) == 2.0
    session.rollback.assert_called_once()


def test_clamp_max_hours():
    assert settings_service.clamp_max_hours(0) == 0.5
    assert settings_service.clamp_max_hours(12) == 8.0
    assert settings_service.clamp_max_hours(2.4) == 2.5
    assert settings_service.clamp_max_hours(3.0) == 3.0


def test_step_max_hours(db):
    assert settings_service.step_max_hours_per_day(db, 0.5).max_hours_per_day == 2.5
    assert settings_service.step_max_hours_per_day(db, -5).max_hours_per_day == 0.5
    assert settings_service.get_max_hours_per_day(db) == 0.5


def test_saving_settings_on_store_failure_becomes_transport_error():
    session = MagicMock()
    session.commit.side_effect = OperationalError("UPDATE", {}, Exception("server closed the connection"))

    with pytest.raises(TransportError) as exc:
        settings_service.set_max_hours_per_day(session, 3.0)

    assert exc.value.status_code == 503
    assert "server closed the connection" in exc.value.detail
    session.rollback.assert_called_once()
