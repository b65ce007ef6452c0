"""
Expense Schemas
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from satlogix.models.expense import ExpenseStatus
from satlogix.schemas.user import UserSummary


class ExpenseCreate(BaseModel):
    """Schema for submitting an expense"""
    user_id: str
    booking_id: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    description: str = Field(..., min_length=1, max_length=2000)
    receipt: Optional[str] = None
    status: ExpenseStatus = ExpenseStatus.PENDING


class ExpenseUpdate(BaseModel):
    """Schema for editing an expense"""
    booking_id: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    receipt: Optional[str] = None


class ExpenseStatusUpdate(BaseModel):
    status: ExpenseStatus


class ExpenseResponse(BaseModel):
    """Schema for expense response"""
    id: str
    user_id: str
    booking_id: Optional[str] = None
    category: str
    amount: float
    currency: str
    description: str
    receipt: Optional[str] = None
    status: ExpenseStatus
    submitted_at: datetime
    approved_at: Optional[datetime] = None
    updated_at: datetime
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
