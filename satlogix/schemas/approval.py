"""
Approval Schemas
Pydantic models for approval requests
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from satlogix.models.approval import ApprovalType, ApprovalStatus
from satlogix.schemas.user import UserSummary


class ApprovalRequestCreate(BaseModel):
    """Schema for opening an approval request"""
    type: ApprovalType
    request_id: str
    requester_id: str
    approver_id: Optional[str] = None
    comments: Optional[str] = None


class ApprovalStatusUpdate(BaseModel):
    """Schema for approving or rejecting a request"""
    status: ApprovalStatus
    approver_id: Optional[str] = None
    comments: Optional[str] = None


class ApprovalRequestResponse(BaseModel):
    """Schema for approval request response"""
    id: str
    type: ApprovalType
    request_id: str
    requester_id: str
    approver_id: Optional[str] = None
    status: ApprovalStatus
    comments: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    requester: Optional[UserSummary] = None
    approver: Optional[UserSummary] = None

    class Config:
        from_attributes = True
