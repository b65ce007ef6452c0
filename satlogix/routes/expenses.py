"""
Expense Routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from satlogix.config.database import get_db
from satlogix.models.expense import ExpenseStatus
from satlogix.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseStatusUpdate, ExpenseResponse
from satlogix.services.expense_service import expense_service
from satlogix.utils.helpers import error_response
from satlogix.utils.logger import setup_logger

logger = setup_logger()
router = APIRouter()


@router.get("")
async def get_expenses(
    user_id: Optional[str] = None,
    status: Optional[ExpenseStatus] = None,
    booking_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List expenses with optional user, status and booking filters"""
    try:
        expenses = expense_service.get_expenses(
            db,
            user_id=user_id,
            status=status,
            booking_id=booking_id
        )
        return {"success": True, "data": [ExpenseResponse.model_validate(e) for e in expenses]}
    except Exception as e:
        logger.error(f"Failed to fetch expenses: {str(e)}")
        return error_response("Failed to fetch expenses")


@router.get("/{expense_id}")
async def get_expense(expense_id: str, db: Session = Depends(get_db)):
    try:
        expense = expense_service.get_expense(db, expense_id)
        if not expense:
            return error_response("Expense not found", 404)
        return {"success": True, "data": ExpenseResponse.model_validate(expense)}
    except Exception as e:
        logger.error(f"Failed to fetch expense {expense_id}: {str(e)}")
        return error_response("Failed to fetch expense")


@router.post("", status_code=201)
async def create_expense(expense_data: ExpenseCreate, db: Session = Depends(get_db)):
    try:
        expense = expense_service.create_expense(db, expense_data)
        return {"success": True, "data": ExpenseResponse.model_validate(expense)}
    except Exception as e:
        logger.error(f"Failed to create expense: {str(e)}")
        return error_response("Failed to create expense")


@router.put("/{expense_id}")
async def update_expense(expense_id: str, expense_data: ExpenseUpdate, db: Session = Depends(get_db)):
    try:
        expense = expense_service.update_expense(db, expense_id, expense_data)
        return {"success": True, "data": ExpenseResponse.model_validate(expense)}
    except Exception as e:
        logger.error(f"Failed to update expense {expense_id}: {str(e)}")
        return error_response("Failed to update expense")


@router.patch("/{expense_id}/status")
async def update_expense_status(
    expense_id: str,
    status_data: ExpenseStatusUpdate,
    db: Session = Depends(get_db)
):
    """Approve, reject or reopen an expense"""
    try:
        expense = expense_service.update_expense_status(db, expense_id, status_data.status)
        return {"success": True, "data": ExpenseResponse.model_validate(expense)}
    except Exception as e:
        logger.error(f"Failed to update status of expense {expense_id}: {str(e)}")
        return error_response("Failed to update expense status")


@router.delete("/{expense_id}")
async def delete_expense(expense_id: str, db: Session = Depends(get_db)):
    try:
        deleted_id = expense_service.delete_expense(db, expense_id)
        return {"success": True, "data": {"id": deleted_id}}
    except Exception as e:
        logger.error(f"Failed to delete expense {expense_id}: {str(e)}")
        return error_response("Failed to delete expense")
