"""
Approval Routes
Approval requests for bookings and expenses
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from satlogix.config.database import get_db
from satlogix.models.approval import ApprovalStatus, ApprovalType
from satlogix.schemas.approval import ApprovalRequestCreate, ApprovalStatusUpdate, ApprovalRequestResponse
from satlogix.services.approval_service import approval_service
from satlogix.utils.helpers import error_response
from satlogix.utils.logger import setup_logger

logger = setup_logger()
router = APIRouter()


@router.get("")
async def get_approval_requests(
    status: Optional[ApprovalStatus] = None,
    type: Optional[ApprovalType] = None,
    requester_id: Optional[str] = None,
    approver_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List approval requests"""
    try:
        approvals = approval_service.get_approval_requests(
            db,
            status=status,
            type=type,
            requester_id=requester_id,
            approver_id=approver_id
        )
        return {"success": True, "data": [ApprovalRequestResponse.model_validate(a) for a in approvals]}
    except Exception as e:
        logger.error(f"Failed to fetch approval requests: {str(e)}")
        return error_response("Failed to fetch approval requests")


@router.get("/{approval_id}")
async def get_approval_request(approval_id: str, db: Session = Depends(get_db)):
    try:
        approval = approval_service.get_approval_request(db, approval_id)
        if not approval:
            return error_response("Approval request not found", 404)
        return {"success": True, "data": ApprovalRequestResponse.model_validate(approval)}
    except Exception as e:
        logger.error(f"Failed to fetch approval request {approval_id}: {str(e)}")
        return error_response("Failed to fetch approval request")


@router.post("", status_code=201)
async def create_approval_request(approval_data: ApprovalRequestCreate, db: Session = Depends(get_db)):
    try:
        approval = approval_service.create_approval_request(db, approval_data)
        return {"success": True, "data": ApprovalRequestResponse.model_validate(approval)}
    except Exception as e:
        logger.error(f"Failed to create approval request: {str(e)}")
        return error_response("Failed to create approval request")


@router.patch("/{approval_id}")
async def update_approval_status(
    approval_id: str,
    decision: ApprovalStatusUpdate,
    db: Session = Depends(get_db)
):
    """
    Approve or reject a request

    Only the request itself changes; the booking or expense it points
    at keeps its own status.
    """
    try:
        approval = approval_service.update_approval_status(
            db,
            approval_id,
            decision.status,
            approver_id=decision.approver_id,
            comments=decision.comments
        )
        return {"success": True, "data": ApprovalRequestResponse.model_validate(approval)}
    except Exception as e:
        logger.error(f"Failed to update approval request {approval_id}: {str(e)}")
        return error_response("Failed to update approval request")


@router.delete("/{approval_id}")
async def delete_approval_request(approval_id: str, db: Session = Depends(get_db)):
    try:
        deleted_id = approval_service.delete_approval_request(db, approval_id)
        return {"success": True, "data": {"id": deleted_id}}
    except Exception as e:
        logger.error(f"Failed to delete approval request {approval_id}: {str(e)}")
        return error_response("Failed to delete approval request")
