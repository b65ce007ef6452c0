"""
Approval Request Model
A request for a manager to approve a booking or an expense
"""

from sqlalchemy import Column, Enum, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from satlogix.config.database import Base
from satlogix.models.types import ShortText, Timestamp, current_timestamp
from satlogix.utils.helpers import generate_id


class ApprovalType(str, enum.Enum):
    """Kind of record an approval request points at"""
    BOOKING = "BOOKING"
    EXPENSE = "EXPENSE"


class ApprovalStatus(str, enum.Enum):
    """Approval status"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ApprovalRequest(Base):
    """Approval request model"""
    __tablename__ = "approval_requests"

    id = Column(ShortText, primary_key=True, default=generate_id)
    type = Column(Enum(ApprovalType, name="ApprovalType"), nullable=False)

    # Id of a booking or expense depending on type; not a foreign key
    request_id = Column("requestId", ShortText, nullable=False)

    requester_id = Column(
        "requesterId",
        ShortText,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False
    )
    approver_id = Column(
        "approverId",
        ShortText,
        ForeignKey("users.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True
    )

    status = Column(
        Enum(ApprovalStatus, name="ApprovalStatus"),
        default=ApprovalStatus.PENDING,
        server_default=ApprovalStatus.PENDING.value,
        nullable=False
    )
    comments = Column(Text, nullable=True)

    # Timestamps
    created_at = Column("createdAt", Timestamp, default=datetime.utcnow, server_default=current_timestamp(), nullable=False)
    updated_at = Column("updatedAt", Timestamp, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    requester = relationship("User", back_populates="submitted_requests", foreign_keys=[requester_id])
    approver = relationship("User", back_populates="approved_requests", foreign_keys=[approver_id])

    def __repr__(self):
        return f"<ApprovalRequest {self.type.value} {self.request_id} - {self.status.value}>"
