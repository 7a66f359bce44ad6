import os
from datetime import date

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import courtbook.models  # noqa: F401
from courtbook.core.deps import get_db
from courtbook.core.security import create_access_token
from courtbook.db.base import Base
from courtbook.main import app
from courtbook.models.booking import Booking
from courtbook.models.user import User
from courtbook.schemas.booking import BookingOut
from courtbook.schemas.weekly_block import WeeklyBlockOut

# 2026-10-19 is a Monday (weekday 1 with Sunday=0)
MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)

engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make(name, *, is_admin=False, status="approved"):
        u = User(name=name, is_admin=is_admin, status=status)
        db.add(u)
        db.commit()
        return u

    return _make


@pytest.fixture
def auth_headers(make_user):
    def _headers(name, **kwargs):
        u = make_user(name, **kwargs)
        return {"Authorization": f"Bearer {create_access_token(u.id)}"}

    return _headers


def add_booking(db, court_index, date_key, time, user_name, co_player_name=None):
    db.add(Booking(court_index=court_index, date_key=date_key, time=time, user_name=user_name, co_player_name=co_player_name))
    db.commit()


def booking(court_index, time, user_name, date_key=MONDAY, co_player_name=None):
    return BookingOut(court_index=court_index, date_key=date_key, time=time, user_name=user_name, co_player_name=co_player_name)


def rule(court_index=0, weekday=1, from_time="18:00", to_time="20:00", reason=None, rule_id="r1"):
    return WeeklyBlockOut(id=rule_id, court_index=court_index, weekday=weekday, from_time=from_time, to_time=to_time, reason=reason)
