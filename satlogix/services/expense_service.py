"""
Expense Service
Data access for expenses
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import datetime

from satlogix.models.expense import Expense, ExpenseStatus
from satlogix.schemas.expense import ExpenseCreate, ExpenseUpdate
from satlogix.utils.exceptions import RecordNotFoundError
from satlogix.utils.helpers import changed_fields
from satlogix.utils.logger import setup_logger, log_audit

logger = setup_logger()


class ExpenseService:
    """Service for expense records"""

    def get_expenses(
        self,
        db: Session,
        user_id: Optional[str] = None,
        status: Optional[ExpenseStatus] = None,
        booking_id: Optional[str] = None
    ) -> List[Expense]:
        """List expenses, most recently submitted first"""
        query = db.query(Expense)

        if user_id:
            query = query.filter(Expense.user_id == user_id)
        if status:
            query = query.filter(Expense.status == status)
        if booking_id:
            query = query.filter(Expense.booking_id == booking_id)

        return query.order_by(Expense.submitted_at.desc()).all()

    def get_expense(self, db: Session, expense_id: str) -> Optional[Expense]:
        return db.query(Expense).filter(Expense.id == expense_id).first()

    def create_expense(self, db: Session, data: ExpenseCreate) -> Expense:
        """
        Submit an expense

        Args:
            db: Database session
            data: Validated expense fields

        Returns:
            Expense: The stored expense
        """
        expense = Expense(**data.model_dump())
        if expense.status == ExpenseStatus.APPROVED:
            expense.approved_at = datetime.utcnow()

        try:
            db.add(expense)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(expense)
        log_audit(
            expense.user_id,
            "create_expense",
            f"expense={expense.id} amount={expense.amount} {expense.currency}"
        )
        return expense

    def update_expense(self, db: Session, expense_id: str, data: ExpenseUpdate) -> Expense:
        expense = self.get_expense(db, expense_id)
        if not expense:
            raise RecordNotFoundError("Expense", expense_id)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(expense, field, value)

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(expense)
        log_audit(expense.user_id, "update_expense", f"expense={expense.id} fields={changed_fields(changes)}")
        return expense

    def update_expense_status(self, db: Session, expense_id: str, status: ExpenseStatus) -> Expense:
        """
        Set the status of an expense

        approvedAt is stamped when the expense becomes APPROVED and
        cleared when it leaves that status.
        """
        expense = self.get_expense(db, expense_id)
        if not expense:
            raise RecordNotFoundError("Expense", expense_id)

        expense.status = status
        if status == ExpenseStatus.APPROVED:
            expense.approved_at = datetime.utcnow()
        else:
            expense.approved_at = None

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(expense)
        log_audit(expense.user_id, "update_expense_status", f"expense={expense.id} status={status.value}")
        logger.info(f"Expense {expense.id} is now {status.value}")
        return expense

    def delete_expense(self, db: Session, expense_id: str) -> str:
        expense = self.get_expense(db, expense_id)
        if not expense:
            raise RecordNotFoundError("Expense", expense_id)

        user_id = expense.user_id
        try:
            db.delete(expense)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        log_audit(user_id, "delete_expense", f"expense={expense_id}")
        return expense_id


# Create singleton instance
expense_service = ExpenseService()
