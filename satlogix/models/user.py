"""
User Model
Travelers, their managers and administrators
"""

from sqlalchemy import Column, Enum, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from satlogix.config.database import Base
from satlogix.models.types import ShortText, Timestamp, current_timestamp
from satlogix.utils.helpers import generate_id


class UserRole(str, enum.Enum):
    """User roles"""
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


class User(Base):
    """User model"""
    __tablename__ = "users"
    __table_args__ = (
        Index("users_email_key", "email", unique=True),
    )

    id = Column(ShortText, primary_key=True, default=generate_id)
    name = Column(ShortText, nullable=False)
    email = Column(ShortText, nullable=False)
    role = Column(
        Enum(UserRole, name="Role"),
        default=UserRole.EMPLOYEE,
        server_default=UserRole.EMPLOYEE.value,
        nullable=False
    )
    department = Column(ShortText, nullable=False)

    # Timestamps
    created_at = Column("createdAt", Timestamp, default=datetime.utcnow, server_default=current_timestamp(), nullable=False)
    updated_at = Column("updatedAt", Timestamp, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Owned records are removed by the database when the user is deleted
    bookings = relationship(
        "Booking",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    expenses = relationship(
        "Expense",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    submitted_requests = relationship(
        "ApprovalRequest",
        back_populates="requester",
        foreign_keys="ApprovalRequest.requester_id",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    # approverId is set to NULL instead
    approved_requests = relationship(
        "ApprovalRequest",
        back_populates="approver",
        foreign_keys="ApprovalRequest.approver_id",
        passive_deletes=True
    )
    locations = relationship(
        "TravelerLocation",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True
    )

    def __repr__(self):
        return f"<User {self.email} ({self.role.value if self.role else None})>"
