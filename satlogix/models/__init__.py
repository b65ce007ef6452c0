"""
Database models
Importing this package registers every table on Base.metadata
"""

from satlogix.models.user import User, UserRole
from satlogix.models.booking import Booking, BookingType, BookingStatus
from satlogix.models.expense import Expense, ExpenseStatus
from satlogix.models.approval import ApprovalRequest, ApprovalType, ApprovalStatus
from satlogix.models.location import TravelerLocation

__all__ = [
    "User",
    "UserRole",
    "Booking",
    "BookingType",
    "BookingStatus",
    "Expense",
    "ExpenseStatus",
    "ApprovalRequest",
    "ApprovalType",
    "ApprovalStatus",
    "TravelerLocation",
]
