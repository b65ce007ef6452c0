"""
Traveler Location Routes
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from satlogix.config.database import get_db
from satlogix.schemas.location import LocationCreate, LocationResponse
from satlogix.services.location_service import location_service
from satlogix.utils.helpers import error_response
from satlogix.utils.logger import setup_logger

logger = setup_logger()
router = APIRouter()


@router.post("", status_code=201)
async def create_location_update(location_data: LocationCreate, db: Session = Depends(get_db)):
    """Record a location ping, flagged when the traveler needs help"""
    try:
        location = location_service.create_location_update(db, location_data)
        return {"success": True, "data": LocationResponse.model_validate(location)}
    except Exception as e:
        logger.error(f"Failed to record location: {str(e)}")
        return error_response("Failed to record location")


@router.get("/emergencies")
async def get_emergency_locations(db: Session = Depends(get_db)):
    try:
        locations = location_service.get_emergency_locations(db)
        return {"success": True, "data": [LocationResponse.model_validate(loc) for loc in locations]}
    except Exception as e:
        logger.error(f"Failed to fetch emergency locations: {str(e)}")
        return error_response("Failed to fetch emergency locations")


@router.get("/{user_id}")
async def get_location_history(
    user_id: str,
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Maximum number of pings"),
    db: Session = Depends(get_db)
):
    """Location history of a traveler, newest first"""
    try:
        locations = location_service.get_location_history(db, user_id, limit=limit)
        return {"success": True, "data": [LocationResponse.model_validate(loc) for loc in locations]}
    except Exception as e:
        logger.error(f"Failed to fetch location history of {user_id}: {str(e)}")
        return error_response("Failed to fetch location history")


@router.get("/{user_id}/latest")
async def get_latest_location(user_id: str, db: Session = Depends(get_db)):
    try:
        location = location_service.get_latest_location(db, user_id)
        if not location:
            return error_response("Location not found", 404)
        return {"success": True, "data": LocationResponse.model_validate(location)}
    except Exception as e:
        logger.error(f"Failed to fetch latest location of {user_id}: {str(e)}")
        return error_response("Failed to fetch latest location")
