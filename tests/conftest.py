"""
Shared fixtures
A SQLite file database is created and dropped around every test
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from satlogix.main import app
from satlogix.config.database import Base, get_db, create_db_engine
from satlogix.models import (
    User,
    UserRole,
    Booking,
    BookingType,
    Expense,
    ApprovalRequest,
    ApprovalType,
    TravelerLocation,
)

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def test_db():
    """Create test database"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(test_db):
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(test_db):
    return TestClient(app)


@pytest.fixture
def make_user(db):
    """Factory creating users with unique emails"""
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        values = {
            "name": f"Traveler {counter['n']}",
            "email": f"traveler{counter['n']}@satlogix.com",
            "department": "Sales",
        }
        values.update(overrides)
        user = User(**values)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_booking(db):
    def _make_booking(user, **overrides):
        start = datetime(2025, 8, 1, 9, 0)
        values = {
            "user_id": user.id,
            "type": BookingType.FLIGHT,
            "destination": "Berlin, DE",
            "start_date": start,
            "end_date": start + timedelta(days=3),
            "cost": 300.0,
        }
        values.update(overrides)
        booking = Booking(**values)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make_booking


@pytest.fixture
def make_expense(db):
    def _make_expense(user, booking=None, **overrides):
        values = {
            "user_id": user.id,
            "booking_id": booking.id if booking else None,
            "category": "Meals",
            "amount": 42.5,
            "description": "Dinner with client",
        }
        values.update(overrides)
        expense = Expense(**values)
        db.add(expense)
        db.commit()
        db.refresh(expense)
        return expense

    return _make_expense


@pytest.fixture
def make_approval(db):
    def _make_approval(requester, request_id, approver=None, **overrides):
        values = {
            "type": ApprovalType.BOOKING,
            "request_id": request_id,
            "requester_id": requester.id,
            "approver_id": approver.id if approver else None,
        }
        values.update(overrides)
        approval = ApprovalRequest(**values)
        db.add(approval)
        db.commit()
        db.refresh(approval)
        return approval

    return _make_approval


@pytest.fixture
def make_location(db):
    def _make_location(user, **overrides):
        values = {
            "user_id": user.id,
            "latitude": 52.52,
            "longitude": 13.405,
            "address": "Alexanderplatz, Berlin",
        }
        values.update(overrides)
        location = TravelerLocation(**values)
        db.add(location)
        db.commit()
        db.refresh(location)
        return location

    return _make_location


@pytest.fixture
def manager(make_user):
    return make_user(name="Maria Manager", email="maria@satlogix.com", role=UserRole.MANAGER)


@pytest.fixture
def db_engine(test_db):
    return engine


@pytest.fixture
def session_factory(test_db):
    """Fresh sessions for reading what another session committed"""
    return TestingSessionLocal
