"""
Booking Schemas
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, Dict, Any
from datetime import datetime

from satlogix.models.booking import BookingType, BookingStatus
from satlogix.schemas.user import UserSummary


class BookingCreate(BaseModel):
    """Schema for creating a booking"""
    user_id: str
    type: BookingType
    destination: str = Field(..., min_length=1, max_length=500)
    start_date: datetime
    end_date: datetime
    status: BookingStatus = BookingStatus.PENDING
    cost: float = Field(..., ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    details: Optional[Dict[str, Any]] = None

    @model_validator(mode='after')
    def validate_dates(self):
        """A booking cannot end before it starts"""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be after or equal to start_date")
        return self


class BookingUpdate(BaseModel):
    """Schema for updating a booking"""
    type: Optional[BookingType] = None
    destination: Optional[str] = Field(None, min_length=1, max_length=500)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    cost: Optional[float] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    details: Optional[Dict[str, Any]] = None

    @model_validator(mode='after')
    def validate_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must be after or equal to start_date")
        return self


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    """Schema for booking response"""
    id: str
    user_id: str
    type: BookingType
    destination: str
    start_date: datetime
    end_date: datetime
    status: BookingStatus
    cost: float
    currency: str
    details: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
