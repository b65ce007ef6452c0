"""
Traveler Location Model
"""

from sqlalchemy import Column, Boolean, ForeignKey, false
from sqlalchemy.orm import relationship
from datetime import datetime

from satlogix.config.database import Base
from satlogix.models.types import Coordinate, ShortText, Timestamp, current_timestamp
from satlogix.utils.helpers import generate_id


class TravelerLocation(Base):
    """Position reported by a traveler"""
    __tablename__ = "traveler_locations"

    id = Column(ShortText, primary_key=True, default=generate_id)
    user_id = Column(
        "userId",
        ShortText,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False
    )
    latitude = Column(Coordinate, nullable=False)
    longitude = Column(Coordinate, nullable=False)
    address = Column(ShortText, nullable=False)
    is_emergency = Column("isEmergency", Boolean, default=False, server_default=false(), nullable=False)
    timestamp = Column(Timestamp, default=datetime.utcnow, server_default=current_timestamp(), nullable=False)

    user = relationship("User", back_populates="locations")

    def __repr__(self):
        flag = " EMERGENCY" if self.is_emergency else ""
        return f"<TravelerLocation {self.latitude},{self.longitude}{flag}>"
