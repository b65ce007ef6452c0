"""
Traveler Location Schemas
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class LocationCreate(BaseModel):
    """Schema for a location ping"""
    user_id: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str = Field(..., min_length=1, max_length=500)
    is_emergency: bool = False
    timestamp: Optional[datetime] = None


class LocationResponse(BaseModel):
    id: str
    user_id: str
    latitude: float
    longitude: float
    address: str
    is_emergency: bool
    timestamp: datetime

    class Config:
        from_attributes = True
