"""
Dashboard Service
Counts and sums across the travel and expense tables
"""

from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict

from satlogix.models.user import User
from satlogix.models.booking import Booking, BookingStatus
from satlogix.models.expense import Expense, ExpenseStatus
from satlogix.models.approval import ApprovalRequest, ApprovalStatus
from satlogix.models.location import TravelerLocation
from satlogix.schemas.dashboard import DashboardStats


class DashboardService:
    """Service for dashboard statistics"""

    def _count_by_status(self, db: Session, model, statuses) -> Dict[str, int]:
        rows = db.query(model.status, func.count(model.id)).group_by(model.status).all()
        counts = {status.value: 0 for status in statuses}
        for status, count in rows:
            counts[status.value] = count
        return counts

    def get_dashboard_stats(self, db: Session) -> DashboardStats:
        """
        Aggregate the dashboard figures

        Amounts are summed regardless of currency.
        """
        expenses_by_status = self._count_by_status(db, Expense, ExpenseStatus)

        return DashboardStats(
            total_users=db.query(func.count(User.id)).scalar(),
            total_bookings=db.query(func.count(Booking.id)).scalar(),
            total_expenses=db.query(func.count(Expense.id)).scalar(),
            pending_approvals=db.query(func.count(ApprovalRequest.id)).filter(
                ApprovalRequest.status == ApprovalStatus.PENDING
            ).scalar(),
            pending_expenses=expenses_by_status[ExpenseStatus.PENDING.value],
            total_booking_cost=db.query(func.coalesce(func.sum(Booking.cost), 0.0)).scalar(),
            total_expense_amount=db.query(func.coalesce(func.sum(Expense.amount), 0.0)).scalar(),
            approved_expense_amount=db.query(func.coalesce(func.sum(Expense.amount), 0.0)).filter(
                Expense.status == ExpenseStatus.APPROVED
            ).scalar(),
            bookings_by_status=self._count_by_status(db, Booking, BookingStatus),
            expenses_by_status=expenses_by_status,
            active_emergencies=db.query(func.count(TravelerLocation.id)).filter(
                TravelerLocation.is_emergency.is_(True)
            ).scalar()
        )


# Create singleton instance
dashboard_service = DashboardService()
