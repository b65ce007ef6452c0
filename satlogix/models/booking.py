"""
Booking Model
Flights, hotels, cars and packages booked for a traveler
"""

from sqlalchemy import Column, Enum, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from satlogix.config.database import Base
from satlogix.models.types import Money, ShortText, Timestamp, current_timestamp
from satlogix.utils.helpers import generate_id


class BookingType(str, enum.Enum):
    """What was booked"""
    FLIGHT = "FLIGHT"
    HOTEL = "HOTEL"
    CAR = "CAR"
    PACKAGE = "PACKAGE"


class BookingStatus(str, enum.Enum):
    """Booking status"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


class Booking(Base):
    """Booking model"""
    __tablename__ = "bookings"

    id = Column(ShortText, primary_key=True, default=generate_id)
    user_id = Column(
        "userId",
        ShortText,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False
    )

    # Booking details
    type = Column(Enum(BookingType, name="BookingType"), nullable=False)
    destination = Column(ShortText, nullable=False)
    start_date = Column("startDate", Timestamp, nullable=False)
    end_date = Column("endDate", Timestamp, nullable=False)
    status = Column(
        Enum(BookingStatus, name="BookingStatus"),
        default=BookingStatus.PENDING,
        server_default=BookingStatus.PENDING.value,
        nullable=False
    )
    cost = Column(Money, nullable=False)
    currency = Column(ShortText, default="USD", server_default="USD", nullable=False)

    # Provider specific payload (flight numbers, hotel confirmation, ...)
    details = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)

    # Timestamps
    created_at = Column("createdAt", Timestamp, default=datetime.utcnow, server_default=current_timestamp(), nullable=False)
    updated_at = Column("updatedAt", Timestamp, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="bookings")
    # bookingId of dependent expenses is set to NULL on delete
    expenses = relationship("Expense", back_populates="booking", passive_deletes=True)

    def __repr__(self):
        return f"<Booking {self.type.value} to {self.destination} - {self.status.value}>"
