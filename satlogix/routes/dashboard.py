"""
Dashboard Routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from satlogix.config.database import get_db
from satlogix.services.dashboard_service import dashboard_service
from satlogix.utils.helpers import error_response
from satlogix.utils.logger import setup_logger

logger = setup_logger()
router = APIRouter()


@router.get("/stats")
async def get_dashboard_stats(db: Session = Depends(get_db)):
    """Counts and totals for the dashboard"""
    try:
        stats = dashboard_service.get_dashboard_stats(db)
        return {"success": True, "data": stats}
    except Exception as e:
        logger.error(f"Failed to fetch dashboard stats: {str(e)}")
        return error_response("Failed to fetch dashboard stats")
