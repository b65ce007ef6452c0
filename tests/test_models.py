"""
Schema Tests
Defaults, uniqueness and the ON DELETE rules of the foreign keys
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from satlogix.models import (
    User,
    UserRole,
    Booking,
    BookingStatus,
    Expense,
    ExpenseStatus,
    ApprovalRequest,
    ApprovalStatus,
    ApprovalType,
    TravelerLocation,
)
from satlogix.services.user_service import user_service
from satlogix.services.booking_service import booking_service


class TestDefaults:
    """Values applied when omitted on insert"""

    def test_user_defaults(self, make_user):
        user = make_user()

        assert user.role == UserRole.EMPLOYEE
        assert len(user.id) == 36
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_booking_defaults(self, make_user, make_booking):
        booking = make_booking(make_user())

        assert booking.status == BookingStatus.PENDING
        assert booking.currency == "USD"
        assert booking.details is None

    def test_expense_defaults(self, make_user, make_expense):
        expense = make_expense(make_user())

        assert expense.status == ExpenseStatus.PENDING
        assert expense.currency == "USD"
        assert expense.submitted_at is not None
        assert expense.approved_at is None
        assert expense.booking_id is None

    def test_approval_and_location_defaults(self, make_user, make_approval, make_location):
        user = make_user()
        approval = make_approval(user, "some-booking-id")
        location = make_location(user)

        assert approval.status == ApprovalStatus.PENDING
        assert approval.approver_id is None
        assert location.is_emergency is False
        assert location.timestamp is not None

    def test_server_defaults_apply_to_raw_inserts(self, db, db_engine):
        """The database itself fills role, status and currency"""
        with db_engine.begin() as conn:
            conn.exec_driver_sql(
                'INSERT INTO users (id, name, email, department, "updatedAt") '
                "VALUES ('u-raw', 'Raw', 'raw@satlogix.com', 'Ops', CURRENT_TIMESTAMP)"
            )
            conn.exec_driver_sql(
                'INSERT INTO bookings (id, "userId", type, destination, "startDate", "endDate", cost, "updatedAt") '
                "VALUES ('b-raw', 'u-raw', 'HOTEL', 'Rome', CURRENT_TIMESTAMP, CURRENT_TIMESTAMP, 99.0, CURRENT_TIMESTAMP)"
            )

        user = db.get(User, "u-raw")
        booking = db.get(Booking, "b-raw")
        assert user.role == UserRole.EMPLOYEE
        assert user.created_at is not None
        assert booking.status == BookingStatus.PENDING
        assert booking.currency == "USD"


class TestUniqueness:

    def test_duplicate_email_rejected(self, db, make_user):
        make_user(email="dup@satlogix.com")

        db.add(User(name="Other", email="dup@satlogix.com", department="Ops"))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

        assert db.query(User).filter(User.email == "dup@satlogix.com").count() == 1


class TestCascades:
    """ON DELETE behaviour of every foreign key"""

    def test_deleting_user_removes_owned_records(
        self, db, session_factory, make_user, make_booking, make_expense, make_approval, make_location
    ):
        user = make_user()
        other = make_user()
        booking = make_booking(user)
        make_expense(user, booking)
        make_expense(user)
        make_approval(user, booking.id)
        make_location(user)
        make_location(user, is_emergency=True)
        kept_booking = make_booking(other)

        user_service.delete_user(db, user.id)

        check = session_factory()
        try:
            assert check.get(User, user.id) is None
            assert check.query(Booking).filter(Booking.user_id == user.id).count() == 0
            assert check.query(Expense).filter(Expense.user_id == user.id).count() == 0
            assert check.query(ApprovalRequest).filter(ApprovalRequest.requester_id == user.id).count() == 0
            assert check.query(TravelerLocation).filter(TravelerLocation.user_id == user.id).count() == 0
            assert check.get(Booking, kept_booking.id) is not None
        finally:
            check.close()

    def test_deleting_approver_nulls_approver_id(self, db, session_factory, make_user, make_approval, manager):
        requester = make_user()
        approval = make_approval(requester, "expense-123", approver=manager, status=ApprovalStatus.APPROVED)

        user_service.delete_user(db, manager.id)

        check = session_factory()
        try:
            survivor = check.get(ApprovalRequest, approval.id)
            assert survivor is not None
            assert survivor.approver_id is None
            assert survivor.status == ApprovalStatus.APPROVED
        finally:
            check.close()

    def test_deleting_booking_keeps_expenses(self, db, session_factory, make_user, make_booking, make_expense):
        user = make_user()
        booking = make_booking(user)
        expense = make_expense(user, booking)

        booking_service.delete_booking(db, booking.id)

        check = session_factory()
        try:
            survivor = check.get(Expense, expense.id)
            assert survivor is not None
            assert survivor.booking_id is None
            assert check.get(Booking, booking.id) is None
        finally:
            check.close()

    def test_cascade_is_enforced_by_the_database(self, db, db_engine, make_user, make_booking, make_expense):
        """A plain DELETE statement, bypassing the ORM, still cascades"""
        user = make_user()
        booking = make_booking(user)
        expense = make_expense(user, booking)

        with db_engine.begin() as conn:
            conn.exec_driver_sql("DELETE FROM bookings WHERE id = ?", (booking.id,))
        db.expire_all()
        assert db.get(Expense, expense.id).booking_id is None

        with db_engine.begin() as conn:
            conn.exec_driver_sql("DELETE FROM users WHERE id = ?", (user.id,))
        db.expire_all()
        assert db.query(Expense).count() == 0


class TestApprovalTarget:

    def test_request_id_is_not_a_foreign_key(self, db, make_user):
        """Any string is accepted as target of an approval request"""
        user = make_user()
        approval = ApprovalRequest(
            type=ApprovalType.EXPENSE,
            request_id="does-not-exist",
            requester_id=user.id
        )
        db.add(approval)
        db.commit()

        assert db.get(ApprovalRequest, approval.id).request_id == "does-not-exist"


class TestSchemaShape:

    def test_column_names_match_sql_contract(self, db_engine):
        inspector = inspect(db_engine)

        assert set(inspector.get_table_names()) == {
            "users", "bookings", "expenses", "approval_requests", "traveler_locations"
        }
        expense_columns = {c["name"] for c in inspector.get_columns("expenses")}
        assert expense_columns == {
            "id", "userId", "bookingId", "category", "amount", "currency", "description",
            "receipt", "status", "submittedAt", "approvedAt", "updatedAt"
        }
        location_columns = {c["name"] for c in inspector.get_columns("traveler_locations")}
        assert location_columns == {
            "id", "userId", "latitude", "longitude", "address", "isEmergency", "timestamp"
        }

    def test_email_index_is_unique(self, db_engine):
        indexes = {i["name"]: i for i in inspect(db_engine).get_indexes("users")}

        assert indexes["users_email_key"]["unique"]
        assert indexes["users_email_key"]["column_names"] == ["email"]
