"""
Location Service
Stores traveler location pings
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional

from satlogix.config.settings import settings
from satlogix.models.location import TravelerLocation
from satlogix.schemas.location import LocationCreate
from satlogix.utils.logger import setup_logger, log_audit

logger = setup_logger()


class LocationService:
    """Service for traveler locations"""

    def create_location_update(self, db: Session, data: LocationCreate) -> TravelerLocation:
        values = data.model_dump(exclude_none=True)
        location = TravelerLocation(**values)

        try:
            db.add(location)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(location)
        if location.is_emergency:
            logger.warning(
                f"Emergency reported by user {location.user_id} at {location.address} "
                f"({location.latitude}, {location.longitude})"
            )
            log_audit(location.user_id, "emergency_location", f"location={location.id}")
        return location

    def get_location_history(
        self,
        db: Session,
        user_id: str,
        limit: Optional[int] = None
    ) -> List[TravelerLocation]:
        """Most recent pings of a user, newest first"""
        return (
            db.query(TravelerLocation)
            .filter(TravelerLocation.user_id == user_id)
            .order_by(TravelerLocation.timestamp.desc())
            .limit(limit or settings.LOCATION_HISTORY_LIMIT)
            .all()
        )

    def get_latest_location(self, db: Session, user_id: str) -> Optional[TravelerLocation]:
        return (
            db.query(TravelerLocation)
            .filter(TravelerLocation.user_id == user_id)
            .order_by(TravelerLocation.timestamp.desc())
            .first()
        )

    def get_emergency_locations(self, db: Session) -> List[TravelerLocation]:
        return (
            db.query(TravelerLocation)
            .filter(TravelerLocation.is_emergency.is_(True))
            .order_by(TravelerLocation.timestamp.desc())
            .all()
        )


# Create singleton instance
location_service = LocationService()
