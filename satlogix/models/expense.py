"""
Expense Model
Represents expense claims submitted by travelers
"""

from sqlalchemy import Column, Enum, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from satlogix.config.database import Base
from satlogix.models.types import Money, ShortText, Timestamp, current_timestamp
from satlogix.utils.helpers import generate_id


class ExpenseStatus(str, enum.Enum):
    """Expense status"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Expense(Base):
    """Expense model"""
    __tablename__ = "expenses"

    id = Column(ShortText, primary_key=True, default=generate_id)

    # Owner and optional booking the expense was incurred on
    user_id = Column(
        "userId",
        ShortText,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False
    )
    booking_id = Column(
        "bookingId",
        ShortText,
        ForeignKey("bookings.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True
    )

    # Expense details
    category = Column(ShortText, nullable=False)
    amount = Column(Money, nullable=False)
    currency = Column(ShortText, default="USD", server_default="USD", nullable=False)
    description = Column(Text, nullable=False)
    receipt = Column(ShortText, nullable=True)  # URL or storage key of the receipt

    status = Column(
        Enum(ExpenseStatus, name="ExpenseStatus"),
        default=ExpenseStatus.PENDING,
        server_default=ExpenseStatus.PENDING.value,
        nullable=False
    )

    # Timestamps
    submitted_at = Column("submittedAt", Timestamp, default=datetime.utcnow, server_default=current_timestamp(), nullable=False)
    approved_at = Column("approvedAt", Timestamp, nullable=True)
    updated_at = Column("updatedAt", Timestamp, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="expenses")
    booking = relationship("Booking", back_populates="expenses")

    def __repr__(self):
        return f"<Expense {self.category} {self.amount} {self.currency} - {self.status.value}>"
