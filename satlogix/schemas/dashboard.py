"""
Dashboard Schemas
"""

from pydantic import BaseModel
from typing import Dict


class DashboardStats(BaseModel):
    """Counts and sums shown on the dashboard"""
    total_users: int
    total_bookings: int
    total_expenses: int
    pending_approvals: int
    pending_expenses: int
    total_booking_cost: float
    total_expense_amount: float
    approved_expense_amount: float
    bookings_by_status: Dict[str, int]
    expenses_by_status: Dict[str, int]
    active_emergencies: int
