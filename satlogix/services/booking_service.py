"""
Booking Service
Data access for bookings
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional

from satlogix.models.booking import Booking, BookingStatus
from satlogix.schemas.booking import BookingCreate, BookingUpdate
from satlogix.utils.exceptions import RecordNotFoundError
from satlogix.utils.helpers import changed_fields
from satlogix.utils.logger import setup_logger, log_audit

logger = setup_logger()


class BookingService:
    """Service for booking records"""

    def get_bookings(
        self,
        db: Session,
        user_id: Optional[str] = None,
        status: Optional[BookingStatus] = None
    ) -> List[Booking]:
        """List bookings, newest first, optionally for one user or status"""
        query = db.query(Booking)

        if user_id:
            query = query.filter(Booking.user_id == user_id)
        if status:
            query = query.filter(Booking.status == status)

        return query.order_by(Booking.created_at.desc()).all()

    def get_booking(self, db: Session, booking_id: str) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    def create_booking(self, db: Session, data: BookingCreate) -> Booking:
        booking = Booking(**data.model_dump())

        try:
            db.add(booking)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(booking)
        log_audit(
            booking.user_id,
            "create_booking",
            f"booking={booking.id} type={booking.type.value} destination={booking.destination}"
        )
        return booking

    def update_booking(self, db: Session, booking_id: str, data: BookingUpdate) -> Booking:
        booking = self.get_booking(db, booking_id)
        if not booking:
            raise RecordNotFoundError("Booking", booking_id)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(booking, field, value)

        # A partial update is checked against the stored dates
        if booking.end_date < booking.start_date:
            db.rollback()
            raise ValueError("end_date must be after or equal to start_date")

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(booking)
        log_audit(booking.user_id, "update_booking", f"booking={booking.id} fields={changed_fields(changes)}")
        return booking

    def update_booking_status(self, db: Session, booking_id: str, status: BookingStatus) -> Booking:
        """Set the status of a booking; any transition is accepted"""
        booking = self.get_booking(db, booking_id)
        if not booking:
            raise RecordNotFoundError("Booking", booking_id)

        booking.status = status

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        db.refresh(booking)
        log_audit(booking.user_id, "update_booking_status", f"booking={booking.id} status={status.value}")
        logger.info(f"Booking {booking.id} is now {status.value}")
        return booking

    def delete_booking(self, db: Session, booking_id: str) -> str:
        """Delete a booking; its expenses stay with bookingId set to NULL"""
        booking = self.get_booking(db, booking_id)
        if not booking:
            raise RecordNotFoundError("Booking", booking_id)

        user_id = booking.user_id
        try:
            db.delete(booking)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

        log_audit(user_id, "delete_booking", f"booking={booking_id}")
        return booking_id


# Create singleton instance
booking_service = BookingService()
