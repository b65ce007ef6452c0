"""
Database Setup Script
Creates all tables and fills them with sample travel data

Usage:
    python -m satlogix.database.setup_database [--reset]
"""

import argparse
from datetime import datetime, timedelta

from satlogix.config.settings import settings
from satlogix.config.database import Base, engine, SessionLocal
from satlogix.models import (
    User,
    UserRole,
    Booking,
    BookingType,
    BookingStatus,
    Expense,
    ExpenseStatus,
    ApprovalRequest,
    ApprovalType,
    ApprovalStatus,
    TravelerLocation,
)


def create_tables(reset: bool = False):
    """Create all database tables, dropping them first on reset"""
    if reset:
        print("Dropping existing tables...")
        Base.metadata.drop_all(bind=engine)
    print(f"Creating database tables on {settings.database_provider}...")
    Base.metadata.create_all(bind=engine)
    print("✓ Database tables created successfully")


def create_initial_users(db) -> dict:
    """Create the sample users, keyed by a short handle"""
    print("\nCreating initial users...")

    users = {
        "admin": User(
            name="Alice Admin",
            email="admin@satlogix.com",
            role=UserRole.ADMIN,
            department="IT"
        ),
        "manager": User(
            name="Marcus Manager",
            email="manager@satlogix.com",
            role=UserRole.MANAGER,
            department="Sales"
        ),
        "john": User(
            name="John Traveler",
            email="john@satlogix.com",
            department="Sales"
        ),
        "sarah": User(
            name="Sarah Consultant",
            email="sarah@satlogix.com",
            department="Consulting"
        ),
        "mike": User(
            name="Mike Engineer",
            email="mike@satlogix.com",
            department="Engineering"
        ),
    }
    db.add_all(users.values())
    db.flush()

    print(f"✓ Initial users created successfully ({len(users)} users)")
    return users


def create_sample_bookings(db, users: dict) -> dict:
    """Create flights, hotels and cars for the travelers"""
    print("\nCreating sample bookings...")
    now = datetime.utcnow()

    bookings = {
        "john_flight": Booking(
            user_id=users["john"].id,
            type=BookingType.FLIGHT,
            destination="New York, NY",
            start_date=now + timedelta(days=7),
            end_date=now + timedelta(days=7, hours=6),
            status=BookingStatus.APPROVED,
            cost=450.00,
            details={"airline": "Delta", "flightNumber": "DL1234", "seat": "14C"}
        ),
        "john_hotel": Booking(
            user_id=users["john"].id,
            type=BookingType.HOTEL,
            destination="New York, NY",
            start_date=now + timedelta(days=7),
            end_date=now + timedelta(days=10),
            status=BookingStatus.PENDING,
            cost=720.00,
            details={"hotel": "Midtown Business Inn", "nights": 3}
        ),
        "sarah_package": Booking(
            user_id=users["sarah"].id,
            type=BookingType.PACKAGE,
            destination="London, UK",
            start_date=now - timedelta(days=20),
            end_date=now - timedelta(days=14),
            status=BookingStatus.COMPLETED,
            cost=2150.00,
            currency="GBP",
            details={"includes": ["flight", "hotel"], "provider": "TravelCo"}
        ),
        "mike_car": Booking(
            user_id=users["mike"].id,
            type=BookingType.CAR,
            destination="Austin, TX",
            start_date=now + timedelta(days=2),
            end_date=now + timedelta(days=4),
            cost=180.00
        ),
    }
    db.add_all(bookings.values())
    db.flush()

    print(f"✓ Sample bookings created successfully ({len(bookings)} bookings)")
    return bookings


def create_sample_expenses(db, users: dict, bookings: dict) -> dict:
    """Create expenses, some linked to a booking"""
    print("\nCreating sample expenses...")
    now = datetime.utcnow()

    expenses = {
        "sarah_meals": Expense(
            user_id=users["sarah"].id,
            booking_id=bookings["sarah_package"].id,
            category="Meals",
            amount=185.40,
            currency="GBP",
            description="Client dinners during London workshop",
            receipt="receipts/sarah-london-meals.pdf",
            status=ExpenseStatus.APPROVED,
            submitted_at=now - timedelta(days=13),
            approved_at=now - timedelta(days=10)
        ),
        "sarah_taxi": Expense(
            user_id=users["sarah"].id,
            booking_id=bookings["sarah_package"].id,
            category="Transport",
            amount=64.00,
            currency="GBP",
            description="Taxi from Heathrow to hotel",
            status=ExpenseStatus.REJECTED,
            submitted_at=now - timedelta(days=13)
        ),
        "john_visa": Expense(
            user_id=users["john"].id,
            category="Fees",
            amount=35.00,
            description="Conference registration fee",
            receipt="receipts/john-conference.png"
        ),
        "mike_fuel": Expense(
            user_id=users["mike"].id,
            booking_id=bookings["mike_car"].id,
            category="Fuel",
            amount=52.75,
            description="Fuel for rental car"
        ),
    }
    db.add_all(expenses.values())
    db.flush()

    print(f"✓ Sample expenses created successfully ({len(expenses)} expenses)")
    return expenses


def create_sample_approvals(db, users: dict, bookings: dict, expenses: dict):
    """Create approval requests for bookings and expenses"""
    print("\nCreating sample approval requests...")

    approvals = [
        ApprovalRequest(
            type=ApprovalType.BOOKING,
            request_id=bookings["john_flight"].id,
            requester_id=users["john"].id,
            approver_id=users["manager"].id,
            status=ApprovalStatus.APPROVED,
            comments="Approved for client visit"
        ),
        ApprovalRequest(
            type=ApprovalType.BOOKING,
            request_id=bookings["john_hotel"].id,
            requester_id=users["john"].id
        ),
        ApprovalRequest(
            type=ApprovalType.EXPENSE,
            request_id=expenses["sarah_taxi"].id,
            requester_id=users["sarah"].id,
            approver_id=users["manager"].id,
            status=ApprovalStatus.REJECTED,
            comments="Airport transfer was included in the package"
        ),
        ApprovalRequest(
            type=ApprovalType.EXPENSE,
            request_id=expenses["mike_fuel"].id,
            requester_id=users["mike"].id
        ),
    ]
    db.add_all(approvals)
    db.flush()

    print(f"✓ Sample approval requests created successfully ({len(approvals)} requests)")


def create_sample_locations(db, users: dict):
    """Create location pings, including one emergency"""
    print("\nCreating sample traveler locations...")
    now = datetime.utcnow()

    locations = [
        TravelerLocation(
            user_id=users["sarah"].id,
            latitude=51.4700,
            longitude=-0.4543,
            address="Heathrow Airport, London, UK",
            timestamp=now - timedelta(days=20)
        ),
        TravelerLocation(
            user_id=users["sarah"].id,
            latitude=51.5074,
            longitude=-0.1278,
            address="Westminster, London, UK",
            timestamp=now - timedelta(days=19)
        ),
        TravelerLocation(
            user_id=users["mike"].id,
            latitude=30.2672,
            longitude=-97.7431,
            address="Downtown Austin, TX",
            is_emergency=True,
            timestamp=now - timedelta(hours=1)
        ),
    ]
    db.add_all(locations)
    db.flush()

    print(f"✓ Sample locations created successfully ({len(locations)} pings)")


def seed_database() -> bool:
    """
    Fill an empty database with sample data

    Returns:
        bool: False when users already exist and nothing was created
    """
    db = SessionLocal()

    try:
        if db.query(User).first():
            print("✓ Users already exist, skipping seed...")
            return False

        users = create_initial_users(db)
        bookings = create_sample_bookings(db, users)
        expenses = create_sample_expenses(db, users, bookings)
        create_sample_approvals(db, users, bookings, expenses)
        create_sample_locations(db, users)

        db.commit()
        return True

    except Exception as e:
        db.rollback()
        print(f"✗ Error seeding database: {str(e)}")
        raise
    finally:
        db.close()


def print_setup_summary():
    """Print what was created"""
    db = SessionLocal()
    try:
        print("\n" + "=" * 70)
        print("✓ DATABASE SETUP COMPLETED SUCCESSFULLY!")
        print("=" * 70)
        print(f"\n  • Database: {settings.database_provider}")
        print(f"  • Users: {db.query(User).count()}")
        print(f"  • Bookings: {db.query(Booking).count()}")
        print(f"  • Expenses: {db.query(Expense).count()}")
        print(f"  • Approval requests: {db.query(ApprovalRequest).count()}")
        print(f"  • Traveler locations: {db.query(TravelerLocation).count()}")
        print("\n  Sample users: admin@satlogix.com, manager@satlogix.com, john@satlogix.com")
        print("=" * 70)
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create and seed the Satlogix database")
    parser.add_argument("--reset", action="store_true", help="drop all tables before seeding")
    args = parser.parse_args(argv)

    create_tables(reset=args.reset)
    if seed_database():
        print_setup_summary()


if __name__ == "__main__":
    main()
