"""
Booking Routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from satlogix.config.database import get_db
from satlogix.models.booking import BookingStatus
from satlogix.schemas.booking import BookingCreate, BookingUpdate, BookingStatusUpdate, BookingResponse
from satlogix.services.booking_service import booking_service
from satlogix.utils.helpers import error_response
from satlogix.utils.logger import setup_logger

logger = setup_logger()
router = APIRouter()


@router.get("")
async def get_bookings(
    user_id: Optional[str] = None,
    status: Optional[BookingStatus] = None,
    db: Session = Depends(get_db)
):
    """List bookings, optionally for one user or in one status"""
    try:
        bookings = booking_service.get_bookings(db, user_id=user_id, status=status)
        return {"success": True, "data": [BookingResponse.model_validate(b) for b in bookings]}
    except Exception as e:
        logger.error(f"Failed to fetch bookings: {str(e)}")
        return error_response("Failed to fetch bookings")


@router.get("/{booking_id}")
async def get_booking(booking_id: str, db: Session = Depends(get_db)):
    try:
        booking = booking_service.get_booking(db, booking_id)
        if not booking:
            return error_response("Booking not found", 404)
        return {"success": True, "data": BookingResponse.model_validate(booking)}
    except Exception as e:
        logger.error(f"Failed to fetch booking {booking_id}: {str(e)}")
        return error_response("Failed to fetch booking")


@router.post("", status_code=201)
async def create_booking(booking_data: BookingCreate, db: Session = Depends(get_db)):
    try:
        booking = booking_service.create_booking(db, booking_data)
        return {"success": True, "data": BookingResponse.model_validate(booking)}
    except Exception as e:
        logger.error(f"Failed to create booking: {str(e)}")
        return error_response("Failed to create booking")


@router.put("/{booking_id}")
async def update_booking(booking_id: str, booking_data: BookingUpdate, db: Session = Depends(get_db)):
    try:
        booking = booking_service.update_booking(db, booking_id, booking_data)
        return {"success": True, "data": BookingResponse.model_validate(booking)}
    except Exception as e:
        logger.error(f"Failed to update booking {booking_id}: {str(e)}")
        return error_response("Failed to update booking")


@router.patch("/{booking_id}/status")
async def update_booking_status(
    booking_id: str,
    status_data: BookingStatusUpdate,
    db: Session = Depends(get_db)
):
    try:
        booking = booking_service.update_booking_status(db, booking_id, status_data.status)
        return {"success": True, "data": BookingResponse.model_validate(booking)}
    except Exception as e:
        logger.error(f"Failed to update status of booking {booking_id}: {str(e)}")
        return error_response("Failed to update booking status")


@router.delete("/{booking_id}")
async def delete_booking(booking_id: str, db: Session = Depends(get_db)):
    """Delete a booking; linked expenses are kept and unlinked"""
    try:
        deleted_id = booking_service.delete_booking(db, booking_id)
        return {"success": True, "data": {"id": deleted_id}}
    except Exception as e:
        logger.error(f"Failed to delete booking {booking_id}: {str(e)}")
        return error_response("Failed to delete booking")
