"""
User Schemas
Pydantic models for user-related requests and responses
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from satlogix.models.user import UserRole


class UserBase(BaseModel):
    """Base user schema with common fields"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    department: str = Field(..., min_length=1, max_length=200)


class UserCreate(UserBase):
    """Schema for creating a new user"""
    role: UserRole = UserRole.EMPLOYEE


class UserUpdate(BaseModel):
    """Schema for updating user information"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    department: Optional[str] = Field(None, min_length=1, max_length=200)


class UserSummary(BaseModel):
    """User fields embedded in other responses"""
    id: str
    name: str
    email: str
    role: UserRole
    department: str

    class Config:
        from_attributes = True


class UserResponse(UserSummary):
    """Schema for user response"""
    created_at: datetime
    updated_at: datetime
